"""Sync CLI command."""

import argparse

from regionkeeper.errors import RegionKeeperError


def cmd_sync(args: argparse.Namespace) -> int:
    from regionkeeper.sync import sync_tree

    try:
        result = sync_tree(
            generated=args.generated,
            target=args.target or ".",
            read_roots=args.read,
            config_path=args.config,
            dry_run=args.dry_run,
        )
    except (RegionKeeperError, OSError) as e:
        print(f"ERROR: {e}")
        return 1

    print("Protected Region Sync Results")
    print("─" * 40)
    print(f"  Regions:   {result['regions']}")
    print(f"  Created:   {len(result['created'])}")
    print(f"  Updated:   {len(result['updated'])}")
    print(f"  Unchanged: {len(result['unchanged'])}")
    for s in result["skipped"]:
        print(f"  Skipped:   {s}")

    if result.get("dry_run"):
        print("\n[DRY RUN] No files were modified.")

    return 0
