"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
)

from fenview.core.enums import Color
from fenview.core.types import FILE_NAMES, Square
from fenview.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from fenview.core.piece import Piece
    from fenview.core.position import Position


class BoardScene(QGraphicsScene):
    """Renders the board squares, coordinates and piece glyphs (read-only)."""

    TILE = 80  # px per square

    _PIECE_FONT_RATIO = 0.75

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._position: Position | None = None
        self._show_coordinates = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, position: Position) -> None:
        """Update the displayed position (full redraw of pieces)."""
        self._position = position
        self._sync_pieces()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._position is not None:
            self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Fira Sans", max(9, t // 5))

        for idx in range(64):
            sq = Square.from_index(idx)
            vf, vr = sq.file, 7 - sq.rank
            is_dark = (sq.file + sq.rank) % 2 == 0  # a1 is dark
            color = self._theme.dark_square if is_dark else self._theme.light_square
            label_color = self._theme.coord_light if is_dark else self._theme.coord_dark
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            # Rank numbers (left edge)
            if sq.file == 0:
                self._add_coord(str(sq.rank + 1), label_color, font, vf * t + 4, vr * t + 2)

            # File letters (bottom edge)
            if sq.rank == 0:
                self._add_coord(
                    FILE_NAMES[sq.file], label_color, font, vf * t + t - 16, vr * t + t - 22
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, text: str, color: QColor, font: QFont, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _make_piece_item(self, piece: Piece) -> QGraphicsSimpleTextItem:
        # White glyphs are painted as filled shapes with a white brush.
        item = QGraphicsSimpleTextItem(piece.solid_symbol)
        item.setFont(QFont("FreeSerif", int(self.TILE * self._PIECE_FONT_RATIO)))
        if piece.color == Color.WHITE:
            item.setBrush(QBrush(self._theme.white_piece))
            item.setPen(QPen(self._theme.piece_outline, 1.5))
        else:
            item.setBrush(QBrush(self._theme.black_piece))
        item.setZValue(1)
        return item

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._position is None:
            return

        t = self.TILE
        for idx, piece in enumerate(self._position.cells()):
            if piece is None:
                continue
            sq = Square.from_index(idx)
            item = self._make_piece_item(piece)
            bounds = item.boundingRect()
            vf, vr = sq.file, 7 - sq.rank
            item.setPos(
                vf * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            self.addItem(item)
            self._piece_items[sq] = item
