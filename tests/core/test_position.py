"""Tests for the Position value object."""

import dataclasses

import pytest

from fenview.core.enums import CastlingRights, Color, PieceType
from fenview.core.notation import STARTING_FEN, position_from_fen
from fenview.core.piece import Piece


def test_cells_are_rank_major(sample_fen: str) -> None:
    pos = position_from_fen(sample_fen)
    cells = list(pos.cells())
    assert len(cells) == 64
    assert cells[0] == Piece(Color.BLACK, PieceType.ROOK)  # a8
    assert cells[4] == Piece(Color.BLACK, PieceType.KING)  # e8
    assert cells[58] == Piece(Color.WHITE, PieceType.KING)  # c1
    assert [c for row in pos.rows() for c in row] == cells


def test_position_is_immutable() -> None:
    pos = position_from_fen(STARTING_FEN)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pos.halfmove_clock = 3  # type: ignore[misc]


def test_has_castling() -> None:
    pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
    assert pos.has_castling(CastlingRights.WHITE_KINGSIDE)
    assert pos.has_castling(CastlingRights.BLACK_QUEENSIDE)
    assert not pos.has_castling(CastlingRights.WHITE_QUEENSIDE)
    assert not pos.has_castling(CastlingRights.WHITE_BOTH)
    assert not pos.has_castling(CastlingRights.NONE)


def test_castling_rights_empty() -> None:
    pos = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
    assert pos.castling_rights() == frozenset()


def test_positions_compare_by_value() -> None:
    assert position_from_fen(STARTING_FEN) == position_from_fen(STARTING_FEN)
