"""Tests for the Settings model and SettingsStore batch updates."""

import pytest

from gamesettings.config import DEFAULT_SETTINGS
from gamesettings.core.models import ColorBlindMode, DisplayMode, Settings
from gamesettings.core.settings_store import SettingsStore


# ---------------------------------------------------------------------------
# Settings model
# ---------------------------------------------------------------------------

class TestSettingsModel:
    def test_defaults(self):
        s = Settings()
        assert s.display_mode == DisplayMode.WINDOWED
        assert s.vsync_enabled is False
        assert s.target_frame_rate == 60
        assert s.master_volume == 100
        assert s.color_blind_mode == ColorBlindMode.NONE

    def test_to_dict_uses_enum_values(self):
        d = Settings(display_mode=DisplayMode.FULLSCREEN).to_dict()
        assert d["display_mode"] == "fullscreen"
        assert d["color_blind_mode"] == "none"
        assert d["resolution_width"] == 1280

    def test_default_settings_mapping(self):
        assert DEFAULT_SETTINGS == Settings().to_dict()
        assert len(DEFAULT_SETTINGS) == 10

    def test_copy_is_independent(self):
        s = Settings()
        c = s.copy()
        c.master_volume = 5.0
        assert s.master_volume == 100.0
        assert c == Settings(master_volume=5.0)


# ---------------------------------------------------------------------------
# SettingsStore
# ---------------------------------------------------------------------------

@pytest.fixture
def store():
    return SettingsStore()


class TestBatchUpdates:
    def test_update_display_only_touches_display(self, store):
        store.update_audio(10, 20, 30)
        store.update_accessibility(ColorBlindMode.DEUTERANOPIA)

        store.update_display(DisplayMode.FULLSCREEN, 2560, 1440, True, 144, True)

        s = store.settings
        assert s.display_mode == DisplayMode.FULLSCREEN
        assert (s.resolution_width, s.resolution_height) == (2560, 1440)
        assert s.vsync_enabled is True
        assert s.target_frame_rate == 144
        assert s.show_performance_overlay is True
        assert (s.master_volume, s.music_volume, s.effects_volume) == (10, 20, 30)
        assert s.color_blind_mode == ColorBlindMode.DEUTERANOPIA

    def test_update_audio_only_touches_audio(self, store):
        before = store.settings.copy()
        store.update_audio(50, 25.5, 0)

        after = store.settings
        assert after.master_volume == 50.0
        assert after.music_volume == 25.5
        assert after.effects_volume == 0.0
        before.master_volume, before.music_volume, before.effects_volume = 50.0, 25.5, 0.0
        assert after == before

    def test_update_accessibility_only_touches_accessibility(self, store):
        before = store.settings.copy()
        store.update_accessibility(ColorBlindMode.TRITANOPIA)

        assert store.settings.color_blind_mode == ColorBlindMode.TRITANOPIA
        before.color_blind_mode = ColorBlindMode.TRITANOPIA
        assert store.settings == before

    def test_update_all(self, store):
        store.update_all(
            DisplayMode.EXCLUSIVE_FULLSCREEN, 1920, 1080, True, 0, True,
            75, 60, 45, ColorBlindMode.PROTANOPIA,
        )
        assert store.settings == Settings(
            display_mode=DisplayMode.EXCLUSIVE_FULLSCREEN,
            resolution_width=1920,
            resolution_height=1080,
            vsync_enabled=True,
            target_frame_rate=0,
            show_performance_overlay=True,
            master_volume=75.0,
            music_volume=60.0,
            effects_volume=45.0,
            color_blind_mode=ColorBlindMode.PROTANOPIA,
        )

    def test_enum_strings_are_converted(self, store):
        store.update_display("fullscreen", 800, 600, False, 30, False)
        store.update_accessibility("protanopia")
        assert store.settings.display_mode is DisplayMode.FULLSCREEN
        assert store.settings.color_blind_mode is ColorBlindMode.PROTANOPIA

    def test_unknown_enum_value_rejected(self, store):
        with pytest.raises(ValueError):
            store.update_accessibility("sepia")

    def test_out_of_range_values_accepted(self, store):
        store.update_audio(250, -10, 1000)
        store.update_display(DisplayMode.WINDOWED, 0, 0, False, 0, False)
        assert store.settings.master_volume == 250.0
        assert store.settings.music_volume == -10.0
        assert store.settings.resolution_width == 0


class TestDirectAccessAndReset:
    def test_direct_field_access(self, store):
        store.settings.vsync_enabled = True
        store.settings.target_frame_rate = 30
        assert store.settings.vsync_enabled is True
        assert store.settings.target_frame_rate == 30

    def test_wraps_given_settings(self):
        s = Settings(master_volume=12.0)
        assert SettingsStore(s).settings is s

    def test_reset_to_defaults(self, store):
        store.update_all(
            DisplayMode.FULLSCREEN, 1, 1, True, 1, True, 1, 1, 1, ColorBlindMode.TRITANOPIA,
        )
        store.reset_to_defaults()
        assert store.settings == Settings()
