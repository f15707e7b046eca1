"""Command-line entry point: decode a FEN string and print the grid."""

from __future__ import annotations

import argparse
import logging
import sys

from fenboard.core import (
    STARTING_FEN,
    ParseError,
    RenderSettings,
    describe_position,
    position_from_fen,
    print_position,
)

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_FEN = 2


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fenboard",
        description="Decode a FEN position and print it as an 8x8 text grid.",
    )
    ap.add_argument(
        "fen",
        nargs="?",
        default=STARTING_FEN,
        help="FEN string (default: starting position; '-' reads a line from stdin)",
    )
    ap.add_argument("--empty", default="*", help="marker for empty squares")
    ap.add_argument("--unicode", action="store_true", help="use chess glyphs")
    ap.add_argument(
        "--summary",
        action="store_true",
        help="also print side to move, castling, en passant and clocks",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    fen = sys.stdin.readline().rstrip("\r\n") if args.fen == "-" else args.fen
    try:
        position = position_from_fen(fen)
    except ParseError as exc:
        _LOGGER.error("Cannot decode FEN (%s): %s", exc.kind, exc)
        return EXIT_BAD_FEN

    settings = RenderSettings(empty_marker=args.empty, unicode=args.unicode)
    print_position(position, settings=settings)
    if args.summary:
        print(describe_position(position))
    return EXIT_OK
