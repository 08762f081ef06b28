"""
Default settings for GameSettings.

These are the values used for any key missing from the user's
configuration file.
"""

from ..core.models import Settings

CONFIG_DIR_NAME = "gamesettings"
CONFIG_FILE_NAME = "settings.ini"

# Field name -> default, with enums as their persisted string value
DEFAULT_SETTINGS = Settings().to_dict()
