"""
Craps Simulator Game Engine.

Pure Python game logic with zero UI/storage dependencies.
Handles dice rolling, round resolution, bankroll bookkeeping and the event log.
"""

from src.engine.base import (
    DiceRoll,
    GameLogEntry,
    GameOutcome,
    GameParams,
    GameResult,
    GameRound,
    LogEntryType,
    RoundPhase,
    RoundState,
    ValidationResult,
)
from src.engine.craps import CrapsEngine
from src.engine.dice import DiceSource
from src.engine.errors import (
    CrapsError,
    InvalidBetError,
    InvalidGameParametersError,
)
from src.engine.game import play_game
from src.engine.validators import validate_game_params

__all__ = [
    # Data Classes
    "DiceRoll",
    "GameLogEntry",
    "GameParams",
    "GameResult",
    "GameRound",
    "RoundState",
    "ValidationResult",
    # Enums
    "GameOutcome",
    "LogEntryType",
    "RoundPhase",
    # Engine
    "CrapsEngine",
    "DiceSource",
    "play_game",
    "validate_game_params",
    # Errors
    "CrapsError",
    "InvalidBetError",
    "InvalidGameParametersError",
]
