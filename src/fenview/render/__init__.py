"""Read-only views of a validated :class:`~fenview.core.position.Position`."""

from fenview.render.base import Renderer
from fenview.render.terminal import TerminalRenderer

__all__ = ["Renderer", "TerminalRenderer"]
