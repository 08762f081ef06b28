"""
Qt integration for GameSettings.
"""

from .qt_display import QtDisplayApplier
from .notifier import SettingsNotifier

__all__ = ["QtDisplayApplier", "SettingsNotifier"]
