"""Typed decode failures."""

from __future__ import annotations

from enum import StrEnum


class ParseErrorKind(StrEnum):
    """Closed set of reasons an encoding can be rejected."""

    MALFORMED_FIELD_COUNT = "malformed-field-count"
    INVALID_PIECE_LETTER = "invalid-piece-letter"
    INVALID_SIDE_TO_MOVE = "invalid-side-to-move"
    INVALID_SQUARE = "invalid-square"
    INVALID_COUNTER = "invalid-counter"
    RANK_OVERFLOW = "rank-overflow"
    FILE_OVERFLOW = "file-overflow"


class ParseError(ValueError):
    """Raised when an encoding cannot be decoded into a position.

    Subclasses :class:`ValueError` so callers that only care about bad input
    can keep catching that, while others branch on :attr:`kind`.
    """

    def __init__(self, kind: ParseErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name}, {str(self)!r})"
