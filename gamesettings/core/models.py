"""
Settings data model.

Defines the flat record of display, audio and accessibility preferences
and the enumerations it uses.
"""

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Dict


class DisplayMode(str, Enum):
    """Window presentation mode."""
    EXCLUSIVE_FULLSCREEN = "exclusive_fullscreen"
    FULLSCREEN = "fullscreen"
    WINDOWED = "windowed"


class ColorBlindMode(str, Enum):
    """Color-blindness compensation filter."""
    NONE = "none"
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"


@dataclass
class Settings:
    """
    Current user preferences.

    Attributes:
        display_mode: Window presentation mode
        resolution_width: Window width in pixels
        resolution_height: Window height in pixels
        vsync_enabled: Whether buffer swaps wait for vertical sync
        target_frame_rate: Frame-rate cap (0 means uncapped)
        show_performance_overlay: Whether the FPS/perf overlay is visible
        master_volume: Master volume, 0-100 recommended
        music_volume: Music volume, 0-100 recommended
        effects_volume: Sound effects volume, 0-100 recommended
        color_blind_mode: Active color-blindness filter
    """
    display_mode: DisplayMode = DisplayMode.WINDOWED
    resolution_width: int = 1280
    resolution_height: int = 720
    vsync_enabled: bool = False
    target_frame_rate: int = 60
    show_performance_overlay: bool = False
    master_volume: float = 100.0
    music_volume: float = 100.0
    effects_volume: float = 100.0
    color_blind_mode: ColorBlindMode = ColorBlindMode.NONE

    def copy(self) -> "Settings":
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain dict.

        Enum members are replaced by their string values.
        """
        result = asdict(self)
        for key, value in result.items():
            if isinstance(value, Enum):
                result[key] = value.value
        return result
