"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from arcadehaven.config import ArcadeConfig

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Route library logging to stderr at *level*."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=_LOG_FORMAT)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from arcadehaven.ui.styles.theme import APP_STYLE

    app.setApplicationName("Arcade Haven")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, config: ArcadeConfig | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from arcadehaven.ui.main_window import MainWindow

    config = config or ArcadeConfig.from_env()
    configure_logging(config.log_level)
    _LOGGER.info(
        "Starting Arcade Haven (%s)",
        "offline" if config.offline else config.api_base_url,
    )

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(config)
    window.show()

    return app.exec()
