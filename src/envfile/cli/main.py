"""Main CLI entry point for envfile."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .. import __version__
from ..cli.analyze import analyze_file

logger = logging.getLogger(__name__)

EPILOG = """
Field configuration grammar (per field, key[,flag]*):
  (none)          key is the field name upper-cased
  MY_KEY          key is MY_KEY
  ,omitempty      default key, empty values neither written nor read
  -               field is ignored

Examples:
  envfile --analyze settings.py     Show the key each record field maps to
  envfile -v --analyze settings.py  Same, with debug logging
"""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the envfile CLI."""
    parser = argparse.ArgumentParser(
        prog="envfile",
        description="envfile: Environment File Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=Path,
        help="Python file whose record classes should be analyzed",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"envfile {__version__}")
    return parser


def run_analyze(file_path: Path) -> int:
    """Run the analyze command and return its exit code.

    Args:
        file_path: Python file containing record definitions
    """
    if not file_path.is_file():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        analyze_file(file_path)
    except Exception as e:
        # Importing the file runs arbitrary user code
        logger.debug("Analysis of %s failed", file_path, exc_info=True)
        print(f"Error analyzing file: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the envfile CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.analyze is not None:
        return run_analyze(args.analyze)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
