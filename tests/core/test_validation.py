"""Tests for the cross-field validator."""

import pytest

from fenview.core.enums import CastlingRights, Color
from fenview.core.errors import (
    CastlingPlausibilityError,
    EnPassantPlausibilityError,
    KingCountError,
)
from fenview.core.notation import parse_placement, position_from_fen
from fenview.core.types import E3, E6
from fenview.core.validation import (
    validate_castling,
    validate_en_passant,
    validate_king_count,
)

AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"
AFTER_E4_E5 = "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR"


class TestCastlingPlausibility:
    def test_all_rights_on_home_squares(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        assert pos.castling == CastlingRights.ALL

    def test_king_moved(self) -> None:
        with pytest.raises(CastlingPlausibilityError) as info:
            position_from_fen("r3k2r/8/8/8/8/8/8/R4K1R w K - 0 1")
        assert info.value.right == CastlingRights.WHITE_KINGSIDE

    def test_rook_missing(self) -> None:
        with pytest.raises(CastlingPlausibilityError) as info:
            position_from_fen("r3k2r/8/8/8/8/8/8/R3K3 w K - 0 1")
        assert info.value.right == CastlingRights.WHITE_KINGSIDE

    def test_rook_of_wrong_color(self) -> None:
        with pytest.raises(CastlingPlausibilityError) as info:
            position_from_fen("r3k2r/8/8/8/8/8/8/r3K2R w Q - 0 1")
        assert info.value.right == CastlingRights.WHITE_QUEENSIDE

    def test_black_rights_checked(self) -> None:
        board = parse_placement("r3k3/8/8/8/8/8/8/R3K2R")
        validate_castling(board, CastlingRights.BLACK_QUEENSIDE)
        with pytest.raises(CastlingPlausibilityError) as info:
            validate_castling(board, CastlingRights.BLACK_KINGSIDE)
        assert info.value.right == CastlingRights.BLACK_KINGSIDE

    def test_first_failing_right_in_kqkq_order(self) -> None:
        board = parse_placement("4k3/8/8/8/8/8/8/4K3")
        with pytest.raises(CastlingPlausibilityError) as info:
            validate_castling(board, CastlingRights.ALL)
        assert info.value.right == CastlingRights.WHITE_KINGSIDE

    def test_message_names_flag(self) -> None:
        err = CastlingPlausibilityError(CastlingRights.BLACK_QUEENSIDE)
        assert "'q'" in str(err)


class TestEnPassantPlausibility:
    def test_after_white_double_push(self) -> None:
        pos = position_from_fen(f"{AFTER_E4} b KQkq e3 0 1")
        assert pos.en_passant == E3

    def test_after_black_double_push(self) -> None:
        pos = position_from_fen(f"{AFTER_E4_E5} w KQkq e6 0 2")
        assert pos.en_passant == E6

    def test_rank3_with_white_to_move(self) -> None:
        with pytest.raises(EnPassantPlausibilityError) as info:
            position_from_fen(f"{AFTER_E4} w KQkq e3 0 1")
        assert info.value.square == E3
        assert "black to move" in info.value.reason

    def test_rank6_with_black_to_move(self) -> None:
        with pytest.raises(EnPassantPlausibilityError) as info:
            position_from_fen(f"{AFTER_E4_E5} b KQkq e6 0 2")
        assert "white to move" in info.value.reason

    def test_pawn_missing(self) -> None:
        with pytest.raises(EnPassantPlausibilityError) as info:
            position_from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR b KQkq e3 0 1")
        assert "e4" in info.value.reason

    def test_pawn_of_wrong_color(self) -> None:
        board = parse_placement("4k3/8/8/8/4p3/8/8/4K3")
        with pytest.raises(EnPassantPlausibilityError, match="white pawn"):
            validate_en_passant(board, Color.BLACK, E3)

    def test_target_occupied(self) -> None:
        with pytest.raises(EnPassantPlausibilityError) as info:
            position_from_fen(
                "rnbqkbnr/pppppppp/8/8/4P3/4N3/PPPP1PPP/RNBQKB1R b KQkq e3 0 1"
            )
        assert "occupied" in info.value.reason

    def test_origin_occupied(self) -> None:
        with pytest.raises(EnPassantPlausibilityError) as info:
            position_from_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPPPPPP/RNBQKBN1 b kq e3 0 1")
        assert "e2" in info.value.reason

    def test_absent_target_is_fine(self) -> None:
        validate_en_passant(parse_placement("8/8/8/8/8/8/8/8"), Color.WHITE, None)


class TestKingCount:
    @pytest.mark.parametrize(
        ("placement", "color", "count"),
        [
            ("4k3/8/8/8/8/8/8/8", Color.WHITE, 0),
            ("4k3/8/8/8/8/8/8/3KK3", Color.WHITE, 2),
            ("8/8/8/8/8/8/8/4K3", Color.BLACK, 0),
            ("3kk3/8/8/8/8/8/8/4K3", Color.BLACK, 2),
        ],
    )
    def test_wrong_count(self, placement: str, color: Color, count: int) -> None:
        with pytest.raises(KingCountError) as info:
            position_from_fen(f"{placement} w - - 0 1")
        assert (info.value.color, info.value.count) == (color, count)

    def test_white_reported_before_black(self) -> None:
        with pytest.raises(KingCountError) as info:
            validate_king_count(parse_placement("8/8/8/8/8/8/8/8"))
        assert info.value.color == Color.WHITE

    def test_promoted_material_is_allowed(self) -> None:
        pos = position_from_fen("QQQQk3/QQQQ4/8/8/8/8/8/4K3 b - - 0 60")
        assert pos.board.occupied() == 10


class TestRuleOrder:
    def test_castling_checked_before_king_count(self) -> None:
        with pytest.raises(CastlingPlausibilityError):
            position_from_fen("4k3/8/8/8/8/8/8/8 w K - 0 1")

    def test_en_passant_checked_before_king_count(self) -> None:
        with pytest.raises(EnPassantPlausibilityError):
            position_from_fen("8/8/8/8/8/8/8/8 b - e3 0 1")
