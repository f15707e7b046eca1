"""Notation package: FEN decoding."""

from fenboard.core.notation.fen import STARTING_FEN, parse, position_from_fen

__all__ = [
    "STARTING_FEN",
    "parse",
    "position_from_fen",
]
