"""Plain-text grid rendering of a :class:`Position`."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from fenboard.core.piece import Piece
from fenboard.core.position import Position
from fenboard.core.types import BOARD_SIZE, square_name


@dataclass(frozen=True)
class RenderSettings:
    """User-configurable grid appearance."""

    empty_marker: str = "*"
    separator: str = " "
    unicode: bool = False


DEFAULT_SETTINGS = RenderSettings()


def _token(piece: Piece | None, settings: RenderSettings) -> str:
    if piece is None:
        return settings.empty_marker
    return piece.symbol if settings.unicode else str(piece)


def render_position(position: Position, settings: RenderSettings | None = None) -> str:
    """Return the 8×8 grid, rank 0 on the first line, file 0 first in each line.

    Never fails: when two pieces share a square the first one in
    ``position.pieces`` is shown.
    """
    s = settings if settings is not None else DEFAULT_SETTINGS
    rows: list[str] = []
    for rank in range(BOARD_SIZE):
        row = [_token(position.piece_at(file, rank), s) for file in range(BOARD_SIZE)]
        rows.append(s.separator.join(row))
    return "\n".join(rows)


def print_position(
    position: Position,
    stream: TextIO | None = None,
    settings: RenderSettings | None = None,
) -> None:
    """Write the rendered grid to *stream* (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    out.write(render_position(position, settings) + "\n")


def describe_position(position: Position) -> str:
    """One-line summary of the non-board fields, e.g. for a status line."""
    castling = "".join(
        letter
        for letter, flag in (
            ("K", position.white_kingside),
            ("Q", position.white_queenside),
            ("k", position.black_kingside),
            ("q", position.black_queenside),
        )
        if flag
    )
    ep = square_name(position.en_passant) if position.en_passant is not None else "-"
    # IntEnum subclasses format as their int value, so str() is explicit.
    return (
        f"{str(position.side_to_move)} to move, castling {castling or '-'}, "
        f"en passant {ep}, halfmove {position.halfmove_clock}, "
        f"fullmove {position.fullmove_number}"
    )
