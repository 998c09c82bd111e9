"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _has_display() -> bool:
    if not sys.platform.startswith("linux"):
        return True
    return any(
        key in os.environ for key in ("DISPLAY", "WAYLAND_DISPLAY", "QT_QPA_PLATFORM")
    )


def ensure_application(argv: list[str] | None = None) -> QApplication:
    """Return the running QApplication, creating it on first use."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        if not _has_display():
            _LOGGER.warning("No display detected; the board window may fail to open")
        app = QApplication(sys.argv if argv is None else argv)
        app.setApplicationName("fenview")
        app.setStyle("Fusion")
        _LOGGER.debug("Created QApplication")
    return app
