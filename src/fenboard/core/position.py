"""Position — a decoded board plus its side, castling, en-passant and clocks."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from fenboard.core.enums import CastlingRights, PieceKind, Side
from fenboard.core.piece import Piece
from fenboard.core.types import Square


@dataclass(frozen=True, slots=True)
class Position:
    """Full position state as read from one encoding string.

    ``pieces`` keeps the encoding's scan order. Two pieces on the same square
    are accepted as-is; use :meth:`duplicate_squares` to detect them.
    """

    pieces: tuple[Piece, ...]
    side_to_move: Side = Side.WHITE
    white_kingside: bool = False
    white_queenside: bool = False
    black_kingside: bool = False
    black_queenside: bool = False
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, file: int, rank: int) -> Piece | None:
        """First piece in scan order standing on (file, rank), if any."""
        for piece in self.pieces:
            if piece.file == file and piece.rank == rank:
                return piece
        return None

    def pieces_of(self, side: Side, kind: PieceKind | None = None) -> tuple[Piece, ...]:
        """Pieces owned by *side*, optionally restricted to *kind*."""
        return tuple(
            p for p in self.pieces if p.side == side and (kind is None or p.kind == kind)
        )

    def duplicate_squares(self) -> list[Square]:
        """Squares holding more than one piece, in first-seen order."""
        counts = Counter(p.square for p in self.pieces)
        return [sq for sq, n in counts.items() if n > 1]

    @property
    def castling(self) -> CastlingRights:
        rights = CastlingRights.NONE
        if self.white_kingside:
            rights |= CastlingRights.WHITE_KINGSIDE
        if self.white_queenside:
            rights |= CastlingRights.WHITE_QUEENSIDE
        if self.black_kingside:
            rights |= CastlingRights.BLACK_KINGSIDE
        if self.black_queenside:
            rights |= CastlingRights.BLACK_QUEENSIDE
        return rights
