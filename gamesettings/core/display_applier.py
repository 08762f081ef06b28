"""
Pushing display settings into the running host.

DisplayApplier is the boundary to whatever owns the window (a game
engine, a Qt window, a test double). HardwareApplier drives it from a
Settings record.
"""

import logging
from abc import ABC, abstractmethod

from .models import DisplayMode, Settings

logger = logging.getLogger(__name__)


class DisplayApplier(ABC):
    """One method per display effect the host must support."""

    @abstractmethod
    def set_window_mode(self, mode: DisplayMode) -> None:
        ...

    @abstractmethod
    def set_resolution(self, width: int, height: int) -> None:
        ...

    @abstractmethod
    def set_vsync(self, enabled: bool) -> None:
        ...

    @abstractmethod
    def set_max_fps(self, fps: int) -> None:
        """Cap the frame rate. 0 removes the cap."""


class HardwareApplier:
    """
    Applies the display subset of Settings through a DisplayApplier.

    Audio and accessibility fields are never pushed; wiring them is up to
    the integrating application.
    """

    def __init__(self, applier: DisplayApplier):
        self.applier = applier

    def apply_display(self, settings: Settings):
        """
        Apply window mode, resolution, VSync and frame-rate cap, in that order.

        Every call is made unconditionally. Exceptions raised by the
        applier are not caught and nothing already applied is rolled back.

        Args:
            settings: Settings to apply
        """
        logger.info(
            f"Applying display settings: {settings.display_mode.value} "
            f"{settings.resolution_width}x{settings.resolution_height}, "
            f"vsync={settings.vsync_enabled}, fps={settings.target_frame_rate}"
        )
        self.applier.set_window_mode(settings.display_mode)
        self.applier.set_resolution(settings.resolution_width, settings.resolution_height)
        self.applier.set_vsync(settings.vsync_enabled)
        self.applier.set_max_fps(settings.target_frame_rate)
