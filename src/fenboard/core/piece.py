"""Piece value object and letter mappings."""

from __future__ import annotations

from dataclasses import dataclass

from fenboard.core.enums import PieceKind, Side
from fenboard.core.errors import ParseError, ParseErrorKind
from fenboard.core.types import is_on_board

# Lowercase letter ↔ PieceKind
_LETTER_MAP: dict[str, PieceKind] = {
    "p": PieceKind.PAWN,
    "r": PieceKind.ROOK,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "q": PieceKind.QUEEN,
    "k": PieceKind.KING,
}

_KIND_LETTERS: dict[PieceKind, str] = {v: k for k, v in _LETTER_MAP.items()}

_UNICODE: dict[tuple[Side, PieceKind], str] = {
    (Side.WHITE, PieceKind.PAWN): "♙",
    (Side.WHITE, PieceKind.KNIGHT): "♘",
    (Side.WHITE, PieceKind.BISHOP): "♗",
    (Side.WHITE, PieceKind.ROOK): "♖",
    (Side.WHITE, PieceKind.QUEEN): "♕",
    (Side.WHITE, PieceKind.KING): "♔",
    (Side.BLACK, PieceKind.PAWN): "♟",
    (Side.BLACK, PieceKind.KNIGHT): "♞",
    (Side.BLACK, PieceKind.BISHOP): "♝",
    (Side.BLACK, PieceKind.ROOK): "♜",
    (Side.BLACK, PieceKind.QUEEN): "♛",
    (Side.BLACK, PieceKind.KING): "♚",
}


def letter_to_kind(letter: str) -> PieceKind:
    """Map a lowercase piece letter to its kind, e.g. 'n' → KNIGHT."""
    try:
        return _LETTER_MAP[letter]
    except KeyError:
        raise ParseError(
            ParseErrorKind.INVALID_PIECE_LETTER,
            f"Invalid piece letter: {letter!r}",
        ) from None


def kind_to_letter(kind: PieceKind) -> str:
    """Lowercase letter for *kind*."""
    return _KIND_LETTERS[kind]


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece placed on (file, rank)."""

    file: int
    rank: int
    kind: PieceKind
    side: Side

    def __post_init__(self) -> None:
        if not is_on_board(self.file, self.rank):
            raise ValueError(
                f"Piece coordinates off the board: ({self.file}, {self.rank})"
            )

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Encoding letter (uppercase = white, lowercase = black)."""
        letter = kind_to_letter(self.kind)
        return letter.upper() if self.side == Side.WHITE else letter

    @property
    def square(self) -> tuple[int, int]:
        return self.file, self.rank

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.side, self.kind)]
