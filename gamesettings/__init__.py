"""
GameSettings - display, audio and accessibility settings for games.
"""

from .core import (
    ColorBlindMode,
    DisplayApplier,
    DisplayMode,
    HardwareApplier,
    Settings,
    SettingsStore,
)
from .config import ConfigPersistence, DEFAULT_SETTINGS
from .core.settings_manager import SettingsManager

__version__ = "1.0.0"

__all__ = [
    "ColorBlindMode",
    "DisplayApplier",
    "DisplayMode",
    "HardwareApplier",
    "Settings",
    "SettingsStore",
    "ConfigPersistence",
    "DEFAULT_SETTINGS",
    "SettingsManager",
]
