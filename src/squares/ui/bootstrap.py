"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from squares.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level_name: str) -> None:
    """Send ``squares`` log records to stderr at *level_name*."""
    level = getattr(logging, level_name.strip().upper(), None)
    known = isinstance(level, int)
    if not known:
        level = logging.WARNING
    logging.basicConfig(format=_LOG_FORMAT, level=level)
    logging.getLogger("squares").setLevel(level)
    if not known:
        _LOGGER.warning("Unknown log level %r, using WARNING", level_name)


def _configure_application(app: QApplication, settings: AppSettings) -> None:
    """Apply app-wide settings and theme."""
    from squares.ui.styles.theme import APP_STYLE

    app.setApplicationName(settings.title)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from squares.ui.main_window import MainWindow

    settings = settings or AppSettings.from_env()
    configure_logging(settings.log_level)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app, settings)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Squares started")

    return app.exec()
