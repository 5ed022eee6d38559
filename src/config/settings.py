"""
Craps Simulator - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

from src.engine.base import GameParams

_SECRET_KEYS = (
    "DEBUG",
    "LOG_LEVEL",
    "DEFAULT_BANKROLL",
    "DEFAULT_BET",
    "DEFAULT_NUMBER_OF_PLAYS",
    "DICE_SEED",
    "SETTINGS_FILE",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets.toml outside Streamlit Cloud
        logging.getLogger(__name__).debug("Streamlit secrets unavailable", exc_info=True)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Form defaults
    default_bankroll: float = 100
    default_bet: float = 5
    default_number_of_plays: int = 10

    # Simulation
    dice_seed: int | None = None

    # Last-used settings
    settings_file: Path = Path(".craps_settings.json")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def default_params(self) -> GameParams:
        """Form defaults as a GameParams."""
        return GameParams(
            bankroll=self.default_bankroll,
            bet=self.default_bet,
            number_of_plays=self.default_number_of_plays,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level to the root logger."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once handlers exist, so set the level directly
    logging.getLogger().setLevel(level)
