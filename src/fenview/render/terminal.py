"""TerminalRenderer — prints the board as a text grid."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from fenview.core.enums import CastlingRights, Color
from fenview.core.types import FILE_NAMES
from fenview.render.base import Renderer

if TYPE_CHECKING:
    from fenview.config import ViewSettings
    from fenview.core.board import Cell
    from fenview.core.position import Position

_EMPTY = "."

_CASTLING_LINES: tuple[tuple[CastlingRights, str], ...] = (
    (CastlingRights.WHITE_KINGSIDE, "White can castle kingside"),
    (CastlingRights.WHITE_QUEENSIDE, "White can castle queenside"),
    (CastlingRights.BLACK_KINGSIDE, "Black can castle kingside"),
    (CastlingRights.BLACK_QUEENSIDE, "Black can castle queenside"),
)


class TerminalRenderer(Renderer):
    """Writes an 8x8 grid (and optionally the FEN state fields) to a stream."""

    def __init__(self, settings: ViewSettings, stream: TextIO | None = None) -> None:
        super().__init__(settings)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def render(self, position: Position) -> None:
        out = self.stream
        if self._settings.show_info:
            for line in self.format_info(position):
                print(line, file=out)
        print(file=out)
        print(self.format_board(position), file=out)

    # ── Formatting ───────────────────────────────────────────────────────

    def _cell_text(self, cell: Cell) -> str:
        if cell is None:
            return _EMPTY
        return cell.symbol if self._settings.unicode_pieces else str(cell)

    def format_board(self, position: Position) -> str:
        """Board rows from rank 8 down to rank 1, one space between cells."""
        coords = self._settings.show_coordinates
        lines: list[str] = []
        for row, cells in enumerate(position.rows()):
            text = " ".join(self._cell_text(cell) for cell in cells)
            lines.append(f"{8 - row} {text}" if coords else text)
        if coords:
            lines.append("  " + " ".join(FILE_NAMES))
        return "\n".join(lines)

    @staticmethod
    def format_info(position: Position) -> list[str]:
        """Plain-language description of the non-board FEN fields."""
        lines = [
            "White to move" if position.side_to_move == Color.WHITE else "Black to move"
        ]

        if position.castling == CastlingRights.NONE:
            lines.append("Neither side can castle")
        else:
            lines.extend(
                text for right, text in _CASTLING_LINES if position.has_castling(right)
            )

        if position.en_passant is None:
            lines.append("No en-passant target square is available")
        else:
            lines.append(f"En-passant target square is {position.en_passant.name}")

        lines.append(f"Halfmove clock: {position.halfmove_clock}")
        lines.append(f"Fullmove number: {position.fullmove_number}")
        return lines
