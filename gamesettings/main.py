"""
GameSettings demo host.

Opens a bare window, loads the saved settings, applies the display
settings to it and writes the file back.
"""

import logging
import sys

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication, QWidget

from . import __version__
from .core.settings_manager import SettingsManager
from .ui import QtDisplayApplier, SettingsNotifier
from .utils import setup_logging


def main():
    """Main entry point for the GameSettings demo."""
    setup_logging(log_level="INFO", log_file=True)
    logger = logging.getLogger(__name__)

    logger.info("=" * 60)
    logger.info(f"GameSettings v{__version__} starting...")
    logger.info("=" * 60)

    app = QApplication(sys.argv)
    app.setApplicationName("GameSettings")
    app.setOrganizationName("GameSettings")

    window = QWidget()
    window.setWindowTitle("GameSettings")
    frame_timer = QTimer(window)
    frame_timer.timeout.connect(window.update)

    manager = SettingsManager(display_applier=QtDisplayApplier(window, frame_timer))
    notifier = SettingsNotifier(manager.persistence, parent=window)
    notifier.settings_changed.connect(window.update)

    manager.load()
    manager.apply_display()
    manager.save()
    frame_timer.start()

    exit_code = app.exec()

    logger.info("GameSettings exiting")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
