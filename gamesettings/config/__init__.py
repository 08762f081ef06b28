"""
Configuration management for GameSettings.

This module handles default values and INI persistence.
"""

from .persistence import ConfigPersistence
from .defaults import DEFAULT_SETTINGS

__all__ = ["ConfigPersistence", "DEFAULT_SETTINGS"]
