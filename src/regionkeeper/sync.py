"""Tree sync — merge a freshly generated tree into its target directory.

The sync process:
1. Load parsers from configuration
2. Read every read root (default: the target) into the region pool
3. Merge every generated file against the pool (nothing is written yet);
   files that do not decode as text are copied byte for byte
4. Write created/updated files unless dry_run

Any parse or pool error aborts the run before a single file is written.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from regionkeeper.config import load_parsers
from regionkeeper.errors import UnreadableFileError
from regionkeeper.log import get_logger
from regionkeeper.support.builder import SupportBuilder
from regionkeeper.support.merger import ProtectedRegionSupport
from regionkeeper.support.reader import FileSystemReader, LocalFileSystemReader, write_file

logger = get_logger("sync")


def build_support(
    read_roots: list[Path | str],
    config_path: Path | str | None = None,
    reader: FileSystemReader | None = None,
) -> tuple[ProtectedRegionSupport, SupportBuilder]:
    """Configure parsers, read all roots and build the merging support."""
    builder = SupportBuilder(reader or LocalFileSystemReader())
    for entry in load_parsers(config_path):
        builder.add_parser(entry.parser, entry.path_filter)
    for root in read_roots:
        builder.read(str(root))
    return builder.build(), builder


def sync_tree(
    generated: Path | str,
    target: Path | str,
    read_roots: list[Path | str] | None = None,
    config_path: Path | str | None = None,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Merge every file below ``generated`` into ``target``."""
    gen = Path(generated)
    tgt = Path(target)
    if not gen.is_dir():
        raise NotADirectoryError(f"Generated tree is not a directory: {gen}")

    reader = LocalFileSystemReader()
    support, builder = build_support(read_roots or [tgt], config_path, reader)
    logger.info("pooled %d protected regions", len(support.pool))

    pending: list[tuple[Path, bytes, str]] = []
    for file in reader.list_files(str(gen)):
        rel = Path(file).relative_to(gen)
        dest = tgt / rel
        try:
            contents = reader.read_file(file)
        except UnreadableFileError:
            logger.debug("copying binary file %s", file)
            data = Path(file).read_bytes()
        else:
            merged = support.merge_protected_regions(str(dest), contents)
            data = merged.encode(reader.encoding)
        if dest.is_file():
            action = "unchanged" if dest.read_bytes() == data else "updated"
        else:
            action = "created"
        pending.append((dest, data, action))

    created = []
    updated = []
    unchanged = []
    for dest, data, action in pending:
        if action == "unchanged":
            unchanged.append(str(dest))
            continue
        if not dry_run:
            write_file(dest, data)
        (created if action == "created" else updated).append(str(dest))

    return {
        "created": created,
        "updated": updated,
        "unchanged": unchanged,
        "regions": len(support.pool),
        "skipped": [f"{s.path} ({s.reason})" for s in builder.skipped],
        "dry_run": dry_run,
    }
