"""WindowRenderer — shows the position in a PyQt6 window."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fenview.render.base import Renderer
from fenview.ui.board.board_view import BoardView
from fenview.ui.bootstrap import ensure_application
from fenview.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from fenview.core.position import Position

_LOGGER = logging.getLogger(__name__)

WINDOW_TITLE = "Chess Board"


class WindowRenderer(Renderer):
    """Opens a board window and blocks until it is closed."""

    def build_view(self, position: Position) -> BoardView:
        """Create (but do not show) a view configured from the settings."""
        ensure_application()
        view = BoardView()
        scene = view.board_scene
        scene.set_theme(BoardTheme.by_name(self._settings.board_theme))
        scene.set_show_coordinates(self._settings.show_coordinates)
        scene.set_position(position)
        view.setWindowTitle(WINDOW_TITLE)
        view.resize(*self._settings.window_size)
        return view

    def render(self, position: Position) -> None:
        app = ensure_application()
        view = self.build_view(position)
        view.show()
        _LOGGER.debug("Board window opened")
        app.exec()
