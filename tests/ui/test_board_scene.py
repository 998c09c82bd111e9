"""Tests for BoardScene and BoardView."""

from __future__ import annotations

from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtGui import QKeyEvent

from fenview.core.notation import STARTING_FEN, position_from_fen
from fenview.core.types import A1, C1, E8, H1, H8
from fenview.ui.board.board_scene import BoardScene
from fenview.ui.board.board_view import BoardView
from fenview.ui.styles.theme import BoardTheme


def test_draws_64_squares_and_16_labels() -> None:
    scene = BoardScene()
    assert len(scene._square_items) == 64
    assert len(scene._coord_items) == 16
    assert scene.sceneRect().width() == 8 * BoardScene.TILE


def test_square_colours_alternate_from_dark_a1() -> None:
    scene = BoardScene()
    theme = BoardTheme.default()
    assert scene._square_items[A1].brush().color() == theme.dark_square
    assert scene._square_items[H1].brush().color() == theme.light_square
    assert scene._square_items[H8].brush().color() == theme.dark_square


def test_set_position_places_one_item_per_piece(sample_fen: str) -> None:
    scene = BoardScene()
    scene.set_position(position_from_fen(sample_fen))
    assert len(scene._piece_items) == 30
    assert scene._piece_items[C1].text() == "♚"
    assert scene._piece_items[E8].text() == "♚"


def test_white_and_black_pieces_use_theme_fill() -> None:
    scene = BoardScene()
    scene.set_position(position_from_fen(STARTING_FEN))
    theme = BoardTheme.default()
    assert scene._piece_items[A1].brush().color() == theme.white_piece
    assert scene._piece_items[H8].brush().color() == theme.black_piece


def test_piece_item_sits_inside_its_square() -> None:
    scene = BoardScene()
    scene.set_position(position_from_fen(STARTING_FEN))
    t = BoardScene.TILE
    center = scene._piece_items[E8].sceneBoundingRect().center()
    assert 4 * t <= center.x() <= 5 * t
    assert 0 <= center.y() <= t


def test_set_position_replaces_previous_pieces() -> None:
    scene = BoardScene()
    scene.set_position(position_from_fen(STARTING_FEN))
    scene.set_position(position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1"))
    assert len(scene._piece_items) == 2


def test_set_theme_redraws_board_and_keeps_pieces() -> None:
    scene = BoardScene()
    scene.set_position(position_from_fen(STARTING_FEN))
    scene.set_theme(BoardTheme.walnut())
    assert scene._square_items[A1].brush().color() == BoardTheme.walnut().dark_square
    assert len(scene._piece_items) == 32
    assert len(scene._square_items) == 64


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_theme_by_name_falls_back_to_default() -> None:
    assert BoardTheme.by_name("Slate") == BoardTheme.slate()
    assert BoardTheme.by_name("unknown") == BoardTheme.default()


def test_escape_closes_view() -> None:
    view = BoardView()
    view.show()
    assert view.isVisible()
    view.keyPressEvent(
        QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Escape, Qt.KeyboardModifier.NoModifier)
    )
    assert not view.isVisible()
