"""Notation package: FEN parsing and serialization."""

from fenview.core.notation.fen import (
    STARTING_FEN,
    castling_to_fen,
    parse_active_color,
    parse_castling,
    parse_en_passant,
    parse_fullmove_number,
    parse_halfmove_clock,
    parse_placement,
    position_from_fen,
    position_to_fen,
    split_fields,
)

__all__ = [
    "STARTING_FEN",
    "castling_to_fen",
    "parse_active_color",
    "parse_castling",
    "parse_en_passant",
    "parse_fullmove_number",
    "parse_halfmove_clock",
    "parse_placement",
    "position_from_fen",
    "position_to_fen",
    "split_fields",
]
