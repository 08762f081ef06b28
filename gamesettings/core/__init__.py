"""
Core settings functionality for GameSettings.

This module provides the business logic that does not depend on a
particular host:
- The Settings data model
- In-memory storage with batch updates
- Applying display settings through a host boundary
"""

from .models import Settings, DisplayMode, ColorBlindMode
from .settings_store import SettingsStore
from .display_applier import DisplayApplier, HardwareApplier

__all__ = [
    "Settings",
    "DisplayMode",
    "ColorBlindMode",
    "SettingsStore",
    "DisplayApplier",
    "HardwareApplier",
]
