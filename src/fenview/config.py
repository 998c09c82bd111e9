"""User-facing view settings."""

from __future__ import annotations

from dataclasses import dataclass

BOARD_THEMES = ("Classic", "Blue", "Green", "Walnut", "Slate")


@dataclass
class ViewSettings:
    """All user-configurable display settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True

    # Terminal
    unicode_pieces: bool = True
    show_info: bool = False

    # Window
    window_size: tuple[int, int] = (600, 600)

    def __post_init__(self) -> None:
        if self.board_theme not in BOARD_THEMES:
            raise ValueError(
                f"Unknown board theme {self.board_theme!r}; choose from {', '.join(BOARD_THEMES)}"
            )
        width, height = self.window_size
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid window size: {width}x{height}")
