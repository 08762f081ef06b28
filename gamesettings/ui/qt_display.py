"""
Qt implementation of the display boundary.

Drives a top-level QWidget: window state, size, swap interval of the
default surface format, and the interval of the frame timer.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QSurfaceFormat
from PySide6.QtWidgets import QWidget

from ..core.display_applier import DisplayApplier
from ..core.models import DisplayMode

logger = logging.getLogger(__name__)


class QtDisplayApplier(DisplayApplier):
    """
    Applies display settings to a Qt window.

    Qt has no exclusive fullscreen; EXCLUSIVE_FULLSCREEN uses a frameless
    fullscreen window, which most drivers promote to exclusive mode.

    The frame-rate cap is expressed as the interval of ``frame_timer``,
    the timer that drives rendering. Without a timer the cap is only
    recorded in ``max_fps``.
    """

    def __init__(self, window: QWidget, frame_timer: Optional[QTimer] = None):
        self.window = window
        self.frame_timer = frame_timer
        self.max_fps = 0

    def set_window_mode(self, mode: DisplayMode) -> None:
        mode = DisplayMode(mode)
        frameless = mode == DisplayMode.EXCLUSIVE_FULLSCREEN
        if bool(self.window.windowFlags() & Qt.WindowType.FramelessWindowHint) != frameless:
            # Changing flags hides the window; it is shown again below
            self.window.setWindowFlag(Qt.WindowType.FramelessWindowHint, frameless)

        if mode == DisplayMode.WINDOWED:
            self.window.showNormal()
        else:
            self.window.showFullScreen()
        logger.debug(f"Window mode set to {mode.value}")

    def set_resolution(self, width: int, height: int) -> None:
        self.window.resize(width, height)
        logger.debug(f"Window resized to {width}x{height}")

    def set_vsync(self, enabled: bool) -> None:
        # Takes effect for GL contexts created after this call
        fmt = QSurfaceFormat.defaultFormat()
        fmt.setSwapInterval(1 if enabled else 0)
        QSurfaceFormat.setDefaultFormat(fmt)
        logger.debug(f"VSync {'enabled' if enabled else 'disabled'}")

    def set_max_fps(self, fps: int) -> None:
        self.max_fps = fps
        if self.frame_timer is not None:
            self.frame_timer.setInterval(round(1000 / fps) if fps > 0 else 0)
        logger.debug(f"Frame-rate cap set to {fps or 'uncapped'}")
