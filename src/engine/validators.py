"""
Craps Simulator - Input Validation Utilities

Provides validation functions for game engine inputs. ``validate_game_params``
reports field-level problems as data for the form layer; ``validate_bet``
raises, since an invalid bet reaching the round engine is a programming
error rather than user input.
"""

import math
from numbers import Real

from src.engine.base import Amount, GameParams, ValidationResult
from src.engine.errors import InvalidBetError

MIN_BANKROLL = 5
MAX_BANKROLL = 1000
MIN_BET = 5
MIN_PLAYS = 1
MAX_PLAYS = 100


def is_finite_number(value: object) -> bool:
    """Returns True for real, finite numbers (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def is_finite_integer(value: object) -> bool:
    """Returns True for finite numbers with an integral value (``3`` or ``3.0``)."""
    if not is_finite_number(value):
        return False
    return isinstance(value, int) or float(value).is_integer()


def validate_bet(bet: Amount) -> Amount:
    """
    Validate a wager for a single round.

    Args:
        bet: Amount wagered

    Returns:
        Validated bet

    Raises:
        InvalidBetError: If bet is not a finite number greater than zero
    """
    if not is_finite_number(bet) or bet <= 0:
        raise InvalidBetError(bet)
    return bet


def _bankroll_error(bankroll: object) -> str | None:
    if not is_finite_number(bankroll):
        return "Bankroll must be a valid number"
    if not (MIN_BANKROLL <= bankroll <= MAX_BANKROLL):
        return f"Bankroll must be between {MIN_BANKROLL} and {MAX_BANKROLL}"
    return None


def _bet_error(bet: object, bankroll: object) -> str | None:
    if not is_finite_number(bet):
        return "Bet must be a valid number"
    if bet < MIN_BET:
        return f"Bet must be at least {MIN_BET}"
    # Only comparable once the bankroll itself is numeric
    if is_finite_number(bankroll) and bet > bankroll:
        return "Bet cannot exceed bankroll"
    return None


def _plays_error(number_of_plays: object) -> str | None:
    if not is_finite_integer(number_of_plays):
        return "Number of plays must be a valid integer"
    if not (MIN_PLAYS <= number_of_plays <= MAX_PLAYS):
        return f"Number of plays must be between {MIN_PLAYS} and {MAX_PLAYS}"
    return None


def validate_game_params(params: GameParams) -> ValidationResult:
    """
    Check every field of a run configuration.

    Each field is checked independently, so several errors can be reported
    at once (at most one per field). The input is never modified.

    Args:
        params: Configuration to validate

    Returns:
        ValidationResult mapping each offending field name
        (``bankroll``, ``bet``, ``number_of_plays``) to its message
    """
    errors: dict[str, str] = {}

    checks = (
        ("bankroll", _bankroll_error(params.bankroll)),
        ("bet", _bet_error(params.bet, params.bankroll)),
        ("number_of_plays", _plays_error(params.number_of_plays)),
    )
    for name, message in checks:
        if message is not None:
            errors[name] = message

    return ValidationResult(errors=errors)
