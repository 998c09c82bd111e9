"""Position — validated board plus the five FEN state fields."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from fenview.core.board import Board, Cell
from fenview.core.enums import CASTLING_FLAGS, CastlingRights, Color
from fenview.core.types import Square


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Instances come out of :func:`fenview.core.notation.position_from_fen`
    and are never modified afterwards.
    """

    board: Board
    side_to_move: Color
    castling: CastlingRights
    en_passant: Square | None
    halfmove_clock: int
    fullmove_number: int

    # ── Read-only views ──────────────────────────────────────────────────

    def cells(self) -> Iterator[Cell]:
        """All 64 cells, rank 8 to rank 1, file a to h."""
        return iter(self.board)

    def rows(self) -> Iterator[tuple[Cell, ...]]:
        return self.board.rows()

    def has_castling(self, right: CastlingRights) -> bool:
        """Whether every flag in *right* is available."""
        return right != CastlingRights.NONE and (self.castling & right) == right

    def castling_rights(self) -> frozenset[CastlingRights]:
        """Individual castling flags that are set."""
        return frozenset(flag for flag in CASTLING_FLAGS if self.castling & flag)
