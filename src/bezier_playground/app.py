"""
Application entry point: configures logging and runs the Qt event loop.
"""
import logging
import sys

from PyQt6.QtWidgets import QApplication

from . import config
from .logging_config import setup_logging
from .gui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    level = logging.getLevelName(config.log_level_name())
    if not isinstance(level, int):
        level = logging.INFO
    setup_logging(level)

    app = QApplication(sys.argv)
    window = MainWindow(order=config.DEFAULT_ORDER)
    window.show()
    logger.info("Bezier Playground started")
    return app.exec()
