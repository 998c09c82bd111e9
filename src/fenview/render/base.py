"""Abstract rendering interface.

The terminal and window views both implement :class:`Renderer`; the core
never depends on either of them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fenview.config import ViewSettings
    from fenview.core.position import Position


class Renderer(ABC):
    """Interface for anything that can display a position."""

    def __init__(self, settings: ViewSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> ViewSettings:
        return self._settings

    @abstractmethod
    def render(self, position: Position) -> None:
        """Display *position*."""
