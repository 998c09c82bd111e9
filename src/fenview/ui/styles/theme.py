"""Visual theme constants for the board window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    white_piece: QColor
    black_piece: QColor
    piece_outline: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(180, 188, 170),  # sage
            dark_square=QColor(67, 74, 58),  # olive
            coord_light=QColor(180, 188, 170),
            coord_dark=QColor(67, 74, 58),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            piece_outline=QColor(0, 0, 0),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            coord_light=QColor(222, 227, 230),
            coord_dark=QColor(140, 162, 173),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            piece_outline=QColor(0, 0, 0),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            coord_light=QColor(236, 238, 220),
            coord_dark=QColor(112, 149, 120),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            piece_outline=QColor(0, 0, 0),
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 210, 184),
            dark_square=QColor(118, 74, 47),
            coord_light=QColor(228, 210, 184),
            coord_dark=QColor(118, 74, 47),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            piece_outline=QColor(0, 0, 0),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            coord_light=QColor(224, 226, 231),
            coord_dark=QColor(101, 110, 122),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            piece_outline=QColor(0, 0, 0),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name such as ``"Walnut"`` (Classic if unknown)."""
        theme_map = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
            "Walnut": cls.walnut,
            "Slate": cls.slate,
        }
        return theme_map.get(name, cls.default)()
