"""
Qt signal bridge for settings change notifications.
"""

from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..config.persistence import ConfigPersistence


class SettingsNotifier(QObject):
    """
    Re-emits save notifications as a Qt signal.

    Lets widgets refresh through signal/slot connections instead of
    registering plain callbacks.
    """

    settings_changed = Signal()

    def __init__(self, persistence: ConfigPersistence, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._persistence = persistence
        self._persistence.add_listener(self._on_saved)

    def detach(self):
        """Stop relaying notifications."""
        self._persistence.remove_listener(self._on_saved)

    def _on_saved(self):
        self.settings_changed.emit()
