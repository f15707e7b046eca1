"""Square type alias and coordinate helpers.

Coordinates follow the encoding's scan order:
    file 0–7 runs left to right (a–h)
    rank 0–7 runs top to bottom of the board field (rank 8 down to rank 1)

En-passant targets are the exception: they are decoded as
``(file letter index, rank digit - 1)`` and so count from the bottom.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (file, rank)

BOARD_SIZE = 8
FILE_NAMES = "abcdefgh"
RANK_DIGITS = "12345678"


def is_on_board(file: int, rank: int) -> bool:
    """Whether both coordinates lie in 0–7."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e3' → (4, 2)."""
    if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in RANK_DIGITS:
        raise ValueError(f"Invalid square name: {name!r}")
    return FILE_NAMES.index(name[0]), int(name[1]) - 1


def square_name(sq: Square) -> str:
    """Inverse of :func:`parse_square`, e.g. (4, 2) → 'e3'."""
    file, rank = sq
    if not is_on_board(file, rank):
        raise ValueError(f"Square off the board: {sq!r}")
    return FILE_NAMES[file] + RANK_DIGITS[rank]
