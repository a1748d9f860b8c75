"""Main CLI entry point for nbtbind."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.report import load_schema, report_file
from ..config import DEFAULT_MAX_DEPTH, DecoderConfig
from ..exceptions import NbtError


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the nbtbind CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="nbtbind",
        description="nbtbind: Named Binary Tag decoding into Pydantic models",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nbtbind --schema level.py bigtest.nbt           Decode with the only root schema in level.py
  nbtbind --schema level.py:Level bigtest.nbt     Decode with an explicit schema class
  nbtbind --strict --schema level.py level.dat    Fail on tags the schema does not describe

Input files must already be decompressed (gunzip level.dat first).
        """,
    )

    parser.add_argument("file", nargs="?", metavar="NBT_FILE", help="Uncompressed NBT file")

    parser.add_argument(
        "--schema",
        metavar="FILE.py[:CLASS]",
        type=str,
        help="Python file defining the Compound schema to decode into",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat unknown tags and type mismatches as errors",
    )

    parser.add_argument(
        "--max-depth",
        metavar="N",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum compound/list nesting (default {DEFAULT_MAX_DEPTH})",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped tags and dropped values to stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"nbtbind {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # If no file specified, show help
    if args.file is None:
        parser.print_help()
        return 0

    if args.schema is None:
        print("Error: --schema is required to decode a file", file=sys.stderr)
        return 1

    nbt_path = Path(args.file)
    if not nbt_path.exists():
        print(f"Error: File not found: {nbt_path}", file=sys.stderr)
        return 1

    try:
        config = DecoderConfig(max_depth=args.max_depth, strict=args.strict)
        schema_class = load_schema(args.schema)
        print(report_file(schema_class, nbt_path, config))
        return 0
    except (NbtError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
