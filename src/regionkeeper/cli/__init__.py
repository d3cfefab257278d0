"""Unified CLI for regionkeeper.

Usage:
    regionkeeper sync <generated> [--target DIR] [--read DIR ...] [--dry-run]
    regionkeeper regions <file>
    regionkeeper check <root>

Options (before or after the command):
    --config <path>   Parser configuration (default: ./regionkeeper.yaml)
    -v, --verbose     Debug logging
"""

import argparse
import logging
import sys

from regionkeeper import __version__
from regionkeeper.cli.regions import cmd_check, cmd_regions
from regionkeeper.cli.sync import cmd_sync
from regionkeeper.log import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regionkeeper",
        description="Keep hand-written protected regions across code regeneration",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", default=None,
        help="Path to regionkeeper.yaml (or set REGIONKEEPER_CONFIG)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    # Same options again on every command; SUPPRESS keeps the top-level value
    # when the option is not repeated after the command name.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=argparse.SUPPRESS, help="Path to regionkeeper.yaml")
    common.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS,
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command")

    # sync
    sync = sub.add_parser(
        "sync", help="Merge a generated tree into its target directory", parents=[common],
    )
    sync.add_argument("generated", help="Directory holding freshly generated files")
    sync.add_argument(
        "--target", default=None,
        help="Directory receiving the merged files (default: current directory)",
    )
    sync.add_argument(
        "--read", action="append", default=None, metavar="DIR",
        help="Directory to collect protected regions from (repeatable, default: target)",
    )
    sync.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    # regions
    reg = sub.add_parser("regions", help="List protected regions of a file", parents=[common])
    reg.add_argument("file", help="File to inspect")

    # check
    chk = sub.add_parser(
        "check", help="Validate all protected regions below a directory", parents=[common],
    )
    chk.add_argument("root", help="Directory to scan")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    dispatch = {
        "sync": cmd_sync,
        "regions": cmd_regions,
        "check": cmd_check,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
