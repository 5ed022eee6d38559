"""
Craps Simulator Storage Layer.

Remembers the last valid game settings between sessions. Run results are
never persisted.
"""

from src.storage.models import SavedSettings
from src.storage.settings_store import SettingsStore

__all__ = ["SavedSettings", "SettingsStore"]
