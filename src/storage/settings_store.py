"""
Craps Simulator - Settings Store

Reads and writes the last-used game settings as a small JSON file. Storage
problems never stop a game: failures are logged and reported to the caller
as ``None`` / ``False``.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from src.engine.base import GameParams
from src.engine.validators import validate_game_params
from src.storage.models import SavedSettings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Manages the saved-settings file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> GameParams | None:
        """Return the saved settings, or None if missing, unreadable or invalid."""
        if not self.path.exists():
            return None

        try:
            saved = SavedSettings.model_validate_json(self.path.read_bytes())
        except (OSError, UnicodeDecodeError, ValidationError):
            logger.exception("Failed to read saved game settings from %s", self.path)
            return None

        params = saved.to_params()
        if not validate_game_params(params).is_valid:
            logger.warning("Ignoring saved game settings in %s: out of range", self.path)
            return None
        return params

    def save(self, params: GameParams) -> bool:
        """Write ``params`` to disk. Returns False if the file could not be written."""
        try:
            payload = SavedSettings.from_params(params).model_dump_json(indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except (OSError, ValidationError):
            logger.exception("Failed to save game settings to %s", self.path)
            return False
        logger.debug("Saved game settings to %s", self.path)
        return True

    def clear(self) -> None:
        """Forget the saved settings."""
        self.path.unlink(missing_ok=True)
