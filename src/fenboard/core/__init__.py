"""Core domain layer — position model, FEN decoding and text rendering.

Quick start::

    from fenboard.core import STARTING_FEN, position_from_fen, render_position

    pos = position_from_fen(STARTING_FEN)
    print(render_position(pos))
"""

from fenboard.core.enums import CastlingRights, PieceKind, Side
from fenboard.core.errors import ParseError, ParseErrorKind
from fenboard.core.notation import STARTING_FEN, parse, position_from_fen
from fenboard.core.piece import Piece, kind_to_letter, letter_to_kind
from fenboard.core.position import Position
from fenboard.core.render import (
    RenderSettings,
    describe_position,
    print_position,
    render_position,
)
from fenboard.core.types import Square, is_on_board, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "PieceKind",
    "Side",
    # Errors
    "ParseError",
    "ParseErrorKind",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    "kind_to_letter",
    "letter_to_kind",
    # Domain objects
    "Piece",
    "Position",
    # Notation
    "STARTING_FEN",
    "parse",
    "position_from_fen",
    # Rendering
    "RenderSettings",
    "describe_position",
    "print_position",
    "render_position",
]
