"""
Command line front end for hexcore.

Opens a file through a temporary copy, applies byte edits, optionally undoes
some of them, prints a hexdump of a region and saves the result on request.
The source file itself is never modified.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core import HexcoreError, HexEditor
from .utils import HexdumpHighlighter, format_hexdump, parse_edit_spec, parse_position

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog="hexcore",
        description="hexcore - In-place byte editor with undo/redo"
    )
    parser.add_argument(
        "file",
        type=str,
        help="File to open"
    )
    parser.add_argument(
        "-o", "--offset",
        type=parse_position,
        default=0,
        help="Position to start the dump at (decimal or 0x hex)"
    )
    parser.add_argument(
        "-n", "--length",
        type=parse_position,
        default=None,
        help="Number of bytes to dump (default: to the end)"
    )
    parser.add_argument(
        "-e", "--edit",
        type=parse_edit_spec,
        action="append",
        default=[],
        metavar="POS:HEX",
        help="Replace bytes at POS, e.g. 0x10:DEADBEEF (repeatable)"
    )
    parser.add_argument(
        "-u", "--undo",
        type=int,
        default=0,
        metavar="N",
        help="Undo the last N edits before dumping"
    )
    parser.add_argument(
        "-w", "--output",
        type=str,
        default=None,
        help="Save the edited data to this file"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )
    parser.add_argument(
        "--style",
        type=str,
        default="default",
        help="Pygments style used for colored output"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity"
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> None:
    """Perform the edits and dump described by ``args``."""

    with HexEditor.from_path(args.file) as editor:
        for position, data in args.edit:
            editor.edit(position, data)
            logger.info("Replaced %d byte(s) at %d", len(data), position)

        for _ in range(args.undo):
            if not editor.undo():
                logger.info("Nothing left to undo")
                break

        length = args.length
        if length is None:
            length = max(editor.length() - args.offset, 0)

        dump = format_hexdump(editor.read_amount_at(args.offset, length), args.offset)

        if not args.no_color and sys.stdout.isatty():
            dump = HexdumpHighlighter(args.style).highlight(dump)

        print(dump)

        if args.output:
            editor.save_as(args.output)
            logger.info("Saved: %s", args.output)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        run(args)
    except (HexcoreError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
