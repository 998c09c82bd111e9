"""Core domain layer — FEN parsing and validation with zero external dependencies.

Quick start::

    from fenview.core import position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for row in pos.rows():
        print(row)
"""

from fenview.core.board import Board
from fenview.core.enums import CastlingRights, Color, PieceType
from fenview.core.errors import (
    ActiveColorError,
    CastlingPlausibilityError,
    CastlingTokenError,
    EnPassantFormatError,
    EnPassantPlausibilityError,
    FenError,
    FieldCountError,
    KingCountError,
    NumericFieldError,
    RankContentError,
    RankCountError,
)
from fenview.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from fenview.core.piece import Piece
from fenview.core.position import Position
from fenview.core.types import Square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types
    "Square",
    # Domain objects
    "Board",
    "Piece",
    "Position",
    # Errors
    "FenError",
    "FieldCountError",
    "RankCountError",
    "RankContentError",
    "ActiveColorError",
    "CastlingTokenError",
    "EnPassantFormatError",
    "NumericFieldError",
    "CastlingPlausibilityError",
    "EnPassantPlausibilityError",
    "KingCountError",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
