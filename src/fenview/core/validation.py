"""Cross-field consistency checks for a parsed FEN record."""

from __future__ import annotations

import logging

from fenview.core.board import Board
from fenview.core.enums import CASTLING_FLAGS, CastlingRights, Color, PieceType
from fenview.core.errors import (
    CastlingPlausibilityError,
    EnPassantPlausibilityError,
    KingCountError,
)
from fenview.core.piece import Piece
from fenview.core.types import A1, A8, E1, E8, H1, H8, Square

_LOGGER = logging.getLogger(__name__)

# right -> (king square, rook square, color)
_CASTLING_HOMES: dict[CastlingRights, tuple[Square, Square, Color]] = {
    CastlingRights.WHITE_KINGSIDE: (E1, H1, Color.WHITE),
    CastlingRights.WHITE_QUEENSIDE: (E1, A1, Color.WHITE),
    CastlingRights.BLACK_KINGSIDE: (E8, H8, Color.BLACK),
    CastlingRights.BLACK_QUEENSIDE: (E8, A8, Color.BLACK),
}

# Target rank (0-based) -> color that must be to move.
_EP_SIDE_TO_MOVE: dict[int, Color] = {
    5: Color.WHITE,  # rank 6: black pawn just went 7 -> 5
    2: Color.BLACK,  # rank 3: white pawn just went 2 -> 4
}


def validate_castling(board: Board, castling: CastlingRights) -> None:
    """Every claimed right needs its king and rook on their home squares."""
    for right in CASTLING_FLAGS:
        if not castling & right:
            continue
        king_sq, rook_sq, color = _CASTLING_HOMES[right]
        if board[king_sq] != Piece(color, PieceType.KING) or board[rook_sq] != Piece(
            color, PieceType.ROOK
        ):
            _LOGGER.debug("Castling right %s rejected", right.name)
            raise CastlingPlausibilityError(right)


def validate_en_passant(
    board: Board, side_to_move: Color, target: Square | None
) -> None:
    """The target must be the square a pawn just skipped over."""
    if target is None:
        return

    expected_side = _EP_SIDE_TO_MOVE.get(target.rank)
    if expected_side is None:
        raise EnPassantPlausibilityError(target, "target is not on rank 3 or 6")
    if side_to_move != expected_side:
        raise EnPassantPlausibilityError(
            target, f"rank {target.rank + 1} target requires {expected_side} to move"
        )

    mover = side_to_move.opposite
    # Direction the mover's pawns travel, in ranks.
    forward = 1 if mover == Color.WHITE else -1
    pawn_sq = target.offset(forward)
    origin_sq = target.offset(-forward)

    if board[pawn_sq] != Piece(mover, PieceType.PAWN):
        raise EnPassantPlausibilityError(target, f"no {mover} pawn on {pawn_sq.name}")
    if not board.is_empty(target):
        raise EnPassantPlausibilityError(target, "target square is occupied")
    if not board.is_empty(origin_sq):
        raise EnPassantPlausibilityError(
            target, f"origin square {origin_sq.name} is occupied"
        )


def validate_king_count(board: Board) -> None:
    """Exactly one king per color, White checked first."""
    for color in (Color.WHITE, Color.BLACK):
        kings = board.pieces(color, PieceType.KING)
        if len(kings) != 1:
            _LOGGER.debug("%s kings found on %s", color, [sq.name for sq in kings])
            raise KingCountError(color, len(kings))


def validate_position(
    board: Board,
    side_to_move: Color,
    castling: CastlingRights,
    en_passant: Square | None,
) -> None:
    """Run all cross-field rules in order, raising on the first failure."""
    validate_castling(board, castling)
    validate_en_passant(board, side_to_move, en_passant)
    validate_king_count(board)
