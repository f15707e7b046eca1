"""FEN decoding."""

from __future__ import annotations

import logging

from fenboard.core.enums import Side
from fenboard.core.errors import ParseError, ParseErrorKind
from fenboard.core.piece import Piece, letter_to_kind
from fenboard.core.position import Position
from fenboard.core.types import BOARD_SIZE, Square, parse_square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_FIELD_COUNT = 6
_RUN_DIGITS = "12345678"


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Raises :class:`ParseError` naming the first malformed field.
    """
    try:
        return _decode(fen)
    except ParseError as exc:
        _LOGGER.debug("Rejected FEN %r (%s): %s", fen, exc.kind, exc)
        raise


def _decode(fen: str) -> Position:
    parts = fen.split(" ")
    if len(parts) != _FIELD_COUNT:
        raise ParseError(
            ParseErrorKind.MALFORMED_FIELD_COUNT,
            f"Invalid FEN (need {_FIELD_COUNT} fields, got {len(parts)}): {fen!r}",
        )

    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    # 1. Piece placement
    pieces = _decode_placement(placement)

    # 2. Side to move
    if side_part == "w":
        side = Side.WHITE
    elif side_part == "b":
        side = Side.BLACK
    else:
        raise ParseError(
            ParseErrorKind.INVALID_SIDE_TO_MOVE,
            f"Invalid FEN side-to-move field: {side_part!r}",
        )

    # 3. Castling ("-" contains none of the letters)
    white_kingside = "K" in castling_part
    white_queenside = "Q" in castling_part
    black_kingside = "k" in castling_part
    black_queenside = "q" in castling_part

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except ValueError:
            raise ParseError(
                ParseErrorKind.INVALID_SQUARE,
                f"Invalid FEN en-passant square: {ep_part!r}",
            ) from None

    # 5–6. Clocks
    halfmove = _decode_counter(halfmove_part, "halfmove clock")
    fullmove = _decode_counter(fullmove_part, "fullmove number")
    if fullmove < 1:
        raise ParseError(
            ParseErrorKind.INVALID_COUNTER,
            f"Invalid FEN fullmove number: {fullmove_part!r}",
        )

    return Position(
        pieces=tuple(pieces),
        side_to_move=side,
        white_kingside=white_kingside,
        white_queenside=white_queenside,
        black_kingside=black_kingside,
        black_queenside=black_queenside,
        en_passant=ep,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )


def _decode_placement(placement: str) -> list[Piece]:
    pieces: list[Piece] = []
    file = 0
    rank = 0
    for ch in placement:
        if ch in _RUN_DIGITS:
            file += int(ch)
            if file > BOARD_SIZE:
                raise ParseError(
                    ParseErrorKind.FILE_OVERFLOW,
                    f"Invalid FEN rank width: rank {rank} runs past the h-file",
                )
        elif ch == "/":
            _check_rank_filled(file, rank)
            rank += 1
            file = 0
            if rank >= BOARD_SIZE:
                raise ParseError(
                    ParseErrorKind.RANK_OVERFLOW,
                    f"Invalid FEN board: more than {BOARD_SIZE} ranks",
                )
        else:
            if not ch.isascii():
                raise ParseError(
                    ParseErrorKind.INVALID_PIECE_LETTER,
                    f"Invalid piece letter: {ch!r}",
                )
            kind = letter_to_kind(ch.lower())
            if file >= BOARD_SIZE:
                raise ParseError(
                    ParseErrorKind.FILE_OVERFLOW,
                    f"Invalid FEN rank width: piece {ch!r} past the h-file on rank {rank}",
                )
            side = Side.WHITE if ch.isupper() else Side.BLACK
            pieces.append(Piece(file, rank, kind, side))
            file += 1

    if rank != BOARD_SIZE - 1:
        raise ParseError(
            ParseErrorKind.RANK_OVERFLOW,
            f"Invalid FEN board (must contain {BOARD_SIZE} ranks, got {rank + 1})",
        )
    _check_rank_filled(file, rank)
    return pieces


def _check_rank_filled(file: int, rank: int) -> None:
    if file != BOARD_SIZE:
        raise ParseError(
            ParseErrorKind.FILE_OVERFLOW,
            f"Invalid FEN rank width: rank {rank} covers {file} files, expected {BOARD_SIZE}",
        )


def _decode_counter(text: str, label: str) -> int:
    # str.isdigit() also accepts non-ASCII digits such as '²'.
    if not text or not (text.isascii() and text.isdigit()):
        raise ParseError(
            ParseErrorKind.INVALID_COUNTER,
            f"Invalid FEN {label}: {text!r}",
        )
    try:
        return int(text)
    except ValueError:
        # Digit strings past sys.get_int_max_str_digits() are refused by int().
        raise ParseError(
            ParseErrorKind.INVALID_COUNTER,
            f"Invalid FEN {label}: {len(text)} digits is too long",
        ) from None


parse = position_from_fen
