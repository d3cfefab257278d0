"""Region inspection CLI commands."""

import argparse
from pathlib import Path

from regionkeeper.errors import RegionKeeperError
from regionkeeper.regions.lexicon import line_of


def cmd_regions(args: argparse.Namespace) -> int:
    from regionkeeper.config import load_parsers
    from regionkeeper.support.reader import LocalFileSystemReader

    path = Path(args.file)
    if not path.is_file():
        print(f"ERROR: not a file: {path}")
        return 1

    try:
        entries = load_parsers(args.config)
        text = LocalFileSystemReader().read_file(str(path))
        found = 0
        for entry in entries:
            if entry.path_filter is not None and not entry.path_filter.accept(str(path)):
                continue
            document = entry.parser.parse(text)
            for region in document.regions:
                line = line_of(text, region.start)
                print(f"  {entry.parser.name:<12} {region.id}  (line {line})")
                found += 1
    except (RegionKeeperError, OSError) as e:
        print(f"ERROR: {e}")
        return 1

    print(f"\n{found} protected regions in {path}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    from regionkeeper.sync import build_support

    try:
        support, builder = build_support([args.root], args.config)
    except (RegionKeeperError, OSError) as e:
        print(f"FAIL {e}")
        return 1

    for s in builder.skipped:
        print(f"  SKIP {s.path} ({s.reason})")
    print(f"  PASS {len(support.pool)} protected regions, ids unique")
    return 0
