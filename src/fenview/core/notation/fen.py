"""FEN parsing and serialization."""

from __future__ import annotations

import logging

from fenview.core.board import Board, Cell
from fenview.core.enums import CastlingRights, Color
from fenview.core.errors import (
    ActiveColorError,
    CastlingTokenError,
    EnPassantFormatError,
    FieldCountError,
    NumericFieldError,
    RankContentError,
    RankCountError,
)
from fenview.core.piece import Piece, is_piece_char
from fenview.core.position import Position
from fenview.core.types import FILE_NAMES, Square
from fenview.core.validation import validate_position

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

FIELD_COUNT = 6

# Longest halfmove clock or fullmove number accepted, in digits.
MAX_COUNTER_DIGITS = 1000

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


# ── Field splitting ─────────────────────────────────────────────────────────


def split_fields(fen: str) -> list[str]:
    """Split *fen* on runs of whitespace into exactly six fields."""
    parts = fen.split()
    if len(parts) != FIELD_COUNT:
        raise FieldCountError(len(parts))
    return parts


# ── Field parsers ───────────────────────────────────────────────────────────


def parse_placement(field: str) -> Board:
    """Field 1: eight '/'-separated ranks, rank 8 first."""
    ranks = field.split("/")
    if len(ranks) != 8:
        raise RankCountError(len(ranks))

    cells: list[Cell] = []
    for rank_idx, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch in "12345678":
                step = int(ch)
                cells.extend([None] * min(step, 8 - file))
                file += step
            elif is_piece_char(ch):
                if file < 8:
                    cells.append(Piece.from_char(ch))
                file += 1
            else:
                raise RankContentError(rank_idx, char=ch)
            if file > 8:
                raise RankContentError(rank_idx, width=file)
        if file != 8:
            raise RankContentError(rank_idx, width=file)
    return Board(cells)


def parse_active_color(field: str) -> Color:
    """Field 2: 'w' or 'b'."""
    if field == "w":
        return Color.WHITE
    if field == "b":
        return Color.BLACK
    raise ActiveColorError(field)


def parse_castling(field: str) -> CastlingRights:
    """Field 3: '-' or each of 'KQkq' at most once."""
    castling = CastlingRights.NONE
    if field == "-":
        return castling
    for ch in field:
        right = _CASTLING_CHARS.get(ch)
        if right is None:
            raise CastlingTokenError(ch)
        if castling & right:
            raise CastlingTokenError(ch, duplicate=True)
        castling |= right
    return castling


def parse_en_passant(field: str) -> Square | None:
    """Field 4: '-' or a file a–h followed by rank 3 or 6."""
    if field == "-":
        return None
    if len(field) != 2 or field[0] not in FILE_NAMES or field[1] not in "36":
        raise EnPassantFormatError(field)
    return Square.parse(field)


def _parse_counter(field: str, index: int, minimum: int) -> int:
    # ASCII digits only: no signs, spaces, underscores or other scripts.
    if not (field.isascii() and field.isdigit()) or len(field) > MAX_COUNTER_DIGITS:
        raise NumericFieldError(index, field, minimum)
    value = int(field)
    if value < minimum:
        raise NumericFieldError(index, field, minimum)
    return value


def parse_halfmove_clock(field: str) -> int:
    """Field 5: non-negative integer."""
    return _parse_counter(field, 5, 0)


def parse_fullmove_number(field: str) -> int:
    """Field 6: positive integer."""
    return _parse_counter(field, 6, 1)


# ── Pipeline ────────────────────────────────────────────────────────────────


def position_from_fen(fen: str) -> Position:
    """Parse and validate a FEN string into a :class:`Position`.

    Fields are parsed in order and the first failure is raised unchanged;
    cross-field rules run only once all six fields parsed.
    """
    placement, side_part, castling_part, ep_part, half_part, full_part = (
        split_fields(fen)
    )

    board = parse_placement(placement)
    side = parse_active_color(side_part)
    castling = parse_castling(castling_part)
    ep = parse_en_passant(ep_part)
    halfmove = parse_halfmove_clock(half_part)
    fullmove = parse_fullmove_number(full_part)
    _LOGGER.debug("Parsed FEN fields: %r (%d pieces)", fen, board.occupied())

    validate_position(board, side, castling, ep)

    return Position(board, side, castling, ep, halfmove, fullmove)


# ── Serialisation ───────────────────────────────────────────────────────────


def castling_to_fen(castling: CastlingRights) -> str:
    text = "".join(ch for ch, right in _CASTLING_CHARS.items() if castling & right)
    return text or "-"


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    ep_str = pos.en_passant.name if pos.en_passant is not None else "-"
    return (
        f"{pos.board.to_placement()} {side_str} {castling_to_fen(pos.castling)} "
        f"{ep_str} {pos.halfmove_clock} {pos.fullmove_number}"
    )
