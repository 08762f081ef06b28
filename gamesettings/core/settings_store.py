"""
In-memory settings store.

Holds the live Settings record and provides batch updates for each
group of fields. Nothing here touches disk or the display.
"""

import logging
from typing import Optional, Union

from .models import ColorBlindMode, DisplayMode, Settings

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Owner of the current Settings record.

    Fields can be read and written directly through ``store.settings``.
    The update_* methods overwrite one group of fields in a single call
    and leave every other field untouched. Values are not range-checked.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings if settings is not None else Settings()

    def update_display(
        self,
        display_mode: Union[DisplayMode, str],
        resolution_width: int,
        resolution_height: int,
        vsync_enabled: bool,
        target_frame_rate: int,
        show_performance_overlay: bool,
    ):
        """Overwrite the display fields."""
        s = self.settings
        s.display_mode = DisplayMode(display_mode)
        s.resolution_width = int(resolution_width)
        s.resolution_height = int(resolution_height)
        s.vsync_enabled = bool(vsync_enabled)
        s.target_frame_rate = int(target_frame_rate)
        s.show_performance_overlay = bool(show_performance_overlay)
        logger.debug(
            f"Display settings updated: {s.display_mode.value} "
            f"{s.resolution_width}x{s.resolution_height}, "
            f"vsync={s.vsync_enabled}, fps={s.target_frame_rate}"
        )

    def update_audio(
        self,
        master_volume: float,
        music_volume: float,
        effects_volume: float,
    ):
        """Overwrite the audio volumes."""
        s = self.settings
        s.master_volume = float(master_volume)
        s.music_volume = float(music_volume)
        s.effects_volume = float(effects_volume)
        logger.debug(
            f"Audio settings updated: master={s.master_volume}, "
            f"music={s.music_volume}, effects={s.effects_volume}"
        )

    def update_accessibility(self, color_blind_mode: Union[ColorBlindMode, str]):
        """Overwrite the accessibility fields."""
        self.settings.color_blind_mode = ColorBlindMode(color_blind_mode)
        logger.debug(f"Accessibility settings updated: {self.settings.color_blind_mode.value}")

    def update_all(
        self,
        display_mode: Union[DisplayMode, str],
        resolution_width: int,
        resolution_height: int,
        vsync_enabled: bool,
        target_frame_rate: int,
        show_performance_overlay: bool,
        master_volume: float,
        music_volume: float,
        effects_volume: float,
        color_blind_mode: Union[ColorBlindMode, str],
    ):
        """Overwrite every field."""
        self.update_display(
            display_mode,
            resolution_width,
            resolution_height,
            vsync_enabled,
            target_frame_rate,
            show_performance_overlay,
        )
        self.update_audio(master_volume, music_volume, effects_volume)
        self.update_accessibility(color_blind_mode)

    def reset_to_defaults(self):
        """Restore every field to its default value."""
        self.settings = Settings()
        logger.info("Settings reset to defaults")
