"""
Craps Simulator - Engine Errors

Both errors subclass ValueError so callers that already guard engine input
with ``except ValueError`` keep working.
"""

from typing import Mapping


class CrapsError(ValueError):
    """Base class for errors raised by the game engine."""


class InvalidBetError(CrapsError):
    """Raised when a round is played with a non-positive or non-finite bet."""

    def __init__(self, bet: object) -> None:
        super().__init__(f"Invalid bet amount: {bet!r}. Bet must be a positive number.")
        self.bet = bet


class InvalidGameParametersError(CrapsError):
    """
    Raised when a run is requested with parameters that fail validation.

    Attributes:
        errors: Field name to message, as reported by the validator
    """

    def __init__(self, errors: Mapping[str, str]) -> None:
        details = "; ".join(f"{name}: {message}" for name, message in errors.items())
        super().__init__(f"Invalid game parameters ({details})")
        self.errors = dict(errors)
