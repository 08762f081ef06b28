"""
Settings manager facade.

Ties the store, persistence and display applier together for callers
that want one object to pass around.
"""

import logging
from typing import Callable, Optional, Union

from ..config.persistence import ConfigPersistence
from .display_applier import DisplayApplier, HardwareApplier
from .models import ColorBlindMode, DisplayMode, Settings
from .settings_store import SettingsStore

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Owns the settings store and its collaborators.

    Typical flow: mutate fields or call an update_* method, call
    apply_display() to make display changes take effect, then save()
    to persist and notify listeners.
    """

    def __init__(
        self,
        persistence: Optional[ConfigPersistence] = None,
        display_applier: Optional[DisplayApplier] = None,
        store: Optional[SettingsStore] = None,
    ):
        self.store = store if store is not None else SettingsStore()
        self.persistence = persistence if persistence is not None else ConfigPersistence()
        self.hardware: Optional[HardwareApplier] = None
        if display_applier is not None:
            self.set_display_applier(display_applier)

    @property
    def settings(self) -> Settings:
        return self.store.settings

    def set_display_applier(self, display_applier: DisplayApplier):
        """Attach the host boundary used by apply_display()."""
        self.hardware = HardwareApplier(display_applier)

    def load(self) -> Settings:
        return self.persistence.load(self.store)

    def save(self) -> bool:
        return self.persistence.save(self.store)

    def apply_display(self):
        """
        Push display settings to the attached host.

        Raises:
            RuntimeError: If no display applier is attached
        """
        if self.hardware is None:
            raise RuntimeError("No display applier attached")
        self.hardware.apply_display(self.store.settings)

    def reset_to_defaults(self):
        self.store.reset_to_defaults()

    def update_display(
        self,
        display_mode: Union[DisplayMode, str],
        resolution_width: int,
        resolution_height: int,
        vsync_enabled: bool,
        target_frame_rate: int,
        show_performance_overlay: bool,
    ):
        """Overwrite the display fields. See SettingsStore.update_display()."""
        self.store.update_display(
            display_mode,
            resolution_width,
            resolution_height,
            vsync_enabled,
            target_frame_rate,
            show_performance_overlay,
        )

    def update_audio(self, master_volume: float, music_volume: float, effects_volume: float):
        """Overwrite the audio volumes. See SettingsStore.update_audio()."""
        self.store.update_audio(master_volume, music_volume, effects_volume)

    def update_accessibility(self, color_blind_mode: Union[ColorBlindMode, str]):
        self.store.update_accessibility(color_blind_mode)

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
        """Overwrite every field. See SettingsStore.update_all()."""
        self.store.update_all(
            display_mode,
            resolution_width,
            resolution_height,
            vsync_enabled,
            target_frame_rate,
            show_performance_overlay,
            master_volume,
            music_volume,
            effects_volume,
            color_blind_mode,
        )

    def add_listener(self, callback: Callable[[], None]):
        self.persistence.add_listener(callback)

    def remove_listener(self, callback: Callable[[], None]):
        self.persistence.remove_listener(callback)
