#!/usr/bin/python3

"""
Entry point script for Sublib.
"""

import sys
import argparse
from typing import List, Optional

from .logger import setup_logger
from .core.dump import HexDump
from .core.syntax import DumpHighlighter
from .utils.hex_utils import make_hex_string, parse_hex_string
from .utils.sequence import index_of, index_of_all
from .utils.text import to_string

EXIT_NOT_FOUND = 1
EXIT_BAD_NEEDLE = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="sublib",
        description="Sublib - sequence search, hex and text conversion for files"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    hex_parser = commands.add_parser("hex", help="Print file contents as a hex string")
    hex_parser.add_argument("file", type=str, help="File to read")

    text_parser = commands.add_parser("text", help="Print file contents decoded as UTF-8")
    text_parser.add_argument("file", type=str, help="File to read")

    find_parser = commands.add_parser("find", help="Find a byte sequence in a file")
    find_parser.add_argument("file", type=str, help="File to search")
    find_parser.add_argument("needle", type=str, help="Text (or hex with --hex) to find")
    find_parser.add_argument(
        "--hex",
        action="store_true",
        help="Interpret the needle as hex bytes (e.g. \"FF 00 A5\")"
    )
    find_parser.add_argument(
        "--all",
        action="store_true",
        help="Print every match instead of the first"
    )

    dump_parser = commands.add_parser("dump", help="Print a hex dump of a file")
    dump_parser.add_argument("file", type=str, help="File to dump")
    dump_parser.add_argument(
        "--width",
        type=int,
        default=HexDump.DEFAULT_BYTES_PER_LINE,
        help="Bytes per line"
    )
    dump_parser.add_argument(
        "--color",
        action="store_true",
        help="Colour the dump for the terminal"
    )

    return parser.parse_args(argv)


def read_file(filename: str) -> bytes:
    with open(filename, 'rb') as f:
        return f.read()


def run_find(data: bytes, args: argparse.Namespace) -> int:
    """Search data for the needle given on the command line."""

    if args.hex:
        needle = parse_hex_string(args.needle)
        if needle is None:
            print(f"Error: invalid hex needle: {args.needle}", file=sys.stderr)
            return EXIT_BAD_NEEDLE
    else:
        needle = args.needle.encode('utf-8')

    if not needle:
        print("Error: cannot search for an empty subsequence", file=sys.stderr)
        return EXIT_BAD_NEEDLE

    if args.all:
        positions = index_of_all(data, needle)
        for pos in positions:
            print(pos)

        return 0 if positions else EXIT_NOT_FOUND

    pos = index_of(data, needle)
    if pos is None:
        return EXIT_NOT_FOUND

    print(pos)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    logger = setup_logger(level="DEBUG" if args.verbose else None)

    try:
        data = read_file(args.file)
    except OSError as e:
        print(f"Error loading {args.file}: {e}", file=sys.stderr)
        return 1

    logger.debug("Loaded %d bytes from %s", len(data), args.file)

    if args.command == "hex":
        print(make_hex_string(data))
        return 0

    if args.command == "text":
        print(to_string(data))
        return 0

    if args.command == "find":
        return run_find(data, args)

    try:
        dump = HexDump(data, args.width)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = dump.render()
    if args.color:
        output = DumpHighlighter().highlight(output)

    if output:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
