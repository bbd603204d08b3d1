"""
# Filelist Command-Line Entry Point

    python -m filelist filelist.f [more.f ...] [--store-errors]

Parses the given filelist(s) and prints the result as JSON.
"""

import sys
from argparse import ArgumentParser
from typing import List, Optional

from . import __version__
from .data import FilelistError, to_json
from .parse import ErrorMode, ParseOptions, parse_files


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="filelist", description="Parse HDL filelists to JSON"
    )
    parser.add_argument("filelists", nargs="+", help="Filelist(s) to parse, in order")
    parser.add_argument(
        "--store-errors",
        action="store_true",
        help="Record failing lines in the output and continue, rather than stopping",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    errormode = ErrorMode.STORE if args.store_errors else ErrorMode.RAISE
    try:
        result = parse_files(args.filelists, options=ParseOptions(errormode=errormode))
    except FilelistError as e:
        print(f"filelist: {e}", file=sys.stderr)
        return 1
    print(to_json(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
