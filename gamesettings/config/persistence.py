"""
Settings persistence for GameSettings.

Reads and writes the Settings record to a section-keyed INI file through
QSettings, filling in defaults for anything missing or unreadable.
"""

import dataclasses
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from PySide6.QtCore import QSettings

from ..core.models import ColorBlindMode, DisplayMode, Settings
from ..core.settings_store import SettingsStore
from .defaults import CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off")


def _as_text(raw: Any) -> str:
    # QSettings returns a list when an INI value contains commas
    if not isinstance(raw, str):
        raise ValueError(f"Expected a scalar string, got {type(raw).__name__}")
    return raw.strip()


def _parse_bool(raw: Any) -> bool:
    text = _as_text(raw).lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError(f"Not a boolean: {raw!r}")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _default_text(name: str) -> str:
    """Persisted form of a field's entry in DEFAULT_SETTINGS."""
    value = DEFAULT_SETTINGS[name]
    if isinstance(value, bool):
        return _format_bool(value)
    if isinstance(value, float):
        return repr(value)
    return str(value)


# Field name -> (parse, format)
_CODECS: Dict[str, Tuple[Callable[[Any], Any], Callable[[Any], str]]] = {
    "display_mode": (lambda raw: DisplayMode(_as_text(raw).lower()), lambda v: v.value),
    "resolution_width": (lambda raw: int(_as_text(raw)), str),
    "resolution_height": (lambda raw: int(_as_text(raw)), str),
    "vsync_enabled": (_parse_bool, _format_bool),
    "target_frame_rate": (lambda raw: int(_as_text(raw)), str),
    "show_performance_overlay": (_parse_bool, _format_bool),
    "master_volume": (lambda raw: float(_as_text(raw)), repr),
    "music_volume": (lambda raw: float(_as_text(raw)), repr),
    "effects_volume": (lambda raw: float(_as_text(raw)), repr),
    "color_blind_mode": (lambda raw: ColorBlindMode(_as_text(raw).lower()), lambda v: v.value),
}


class ConfigPersistence:
    """
    Loads and saves Settings to an INI file.

    All keys live in the [General] section. Path:
        Linux/macOS: ~/.config/gamesettings/settings.ini
        Windows: %APPDATA%\\gamesettings\\settings.ini

    Listeners registered with add_listener() are called with no
    arguments after every successful save.
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize persistence.

        Args:
            config_file: Explicit INI path; the per-user path is used if None
        """
        if config_file is None:
            self.config_dir = self.get_config_dir()
            self.config_file = self.config_dir / CONFIG_FILE_NAME
        else:
            self.config_file = Path(config_file)
            self.config_dir = self.config_file.parent
        self._listeners: List[Callable[[], None]] = []

    @staticmethod
    def get_config_dir() -> Path:
        """
        Get platform-specific configuration directory.

        Returns:
            Path to configuration directory
        """
        if os.name == 'nt':  # Windows
            base = os.environ.get('APPDATA', os.path.expanduser('~'))
        else:  # Linux/macOS
            base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        config_dir = Path(base) / CONFIG_DIR_NAME

        config_dir.mkdir(parents=True, exist_ok=True)

        return config_dir

    def add_listener(self, callback: Callable[[], None]):
        """Register a callback fired after each successful save."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]):
        """Unregister a callback. Unknown callbacks are ignored."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _open(self) -> QSettings:
        return QSettings(str(self.config_file), QSettings.Format.IniFormat)

    def load(self, store: SettingsStore) -> Settings:
        """
        Load settings from file into the store.

        Keys that are missing or hold an unparsable value get their
        default, and those defaults are written back to the file. An
        unreadable or malformed file is treated as empty.

        Args:
            store: Store that receives the loaded settings

        Returns:
            The loaded Settings (same object as store.settings)
        """
        qsettings = self._open()
        if qsettings.status() != QSettings.Status.NoError:
            logger.warning(
                f"Could not read {self.config_file} ({qsettings.status().name}), using defaults"
            )
            qsettings.clear()

        values: Dict[str, Any] = {}
        written_back: List[str] = []

        for name, (parse, _) in _CODECS.items():
            raw = qsettings.value(name)
            value = None
            if raw is not None:
                try:
                    value = parse(raw)
                except ValueError:
                    logger.warning(f"Invalid value for '{name}': {raw!r}, using default")

            if value is None:
                default_text = _default_text(name)
                value = parse(default_text)
                qsettings.setValue(name, default_text)
                written_back.append(name)

            values[name] = value

        if written_back:
            qsettings.sync()
            logger.info(f"Wrote defaults for {len(written_back)} key(s): {', '.join(written_back)}")

        store.settings = Settings(**values)
        logger.info(f"Loaded settings from {self.config_file}")
        return store.settings

    def save(self, store: SettingsStore) -> bool:
        """
        Save every field to file, then notify listeners.

        Creates parent directories if needed.

        Args:
            store: Store holding the settings to write

        Returns:
            True if the file was written
        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")
            return False

        qsettings = self._open()
        for field in dataclasses.fields(Settings):
            _, format_value = _CODECS[field.name]
            qsettings.setValue(field.name, format_value(getattr(store.settings, field.name)))
        qsettings.sync()

        if qsettings.status() != QSettings.Status.NoError:
            logger.error(
                f"Failed to save settings: cannot write {self.config_file} ({qsettings.status().name})"
            )
            return False

        logger.info(f"Saved settings to {self.config_file}")
        self._notify()
        return True

    def _notify(self):
        for callback in list(self._listeners):
            callback()
