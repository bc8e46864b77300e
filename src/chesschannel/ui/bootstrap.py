"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chesschannel.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication, settings: AppSettings) -> None:
    """Apply app-wide settings and theme."""
    from chesschannel.ui.styles.theme import APP_STYLE

    app.setApplicationName(settings.window_title)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chesschannel.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app, settings)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Board window opened (theme=%s)", settings.board_theme)

    return app.exec()
