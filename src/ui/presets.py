"""Form presets and text-to-number coercion for the game controls."""

from __future__ import annotations

import math

from src.engine.base import Amount, GameParams, format_amount

PRESETS: dict[str, GameParams] = {
    "low": GameParams(bankroll=100, bet=5, number_of_plays=10),
    "standard": GameParams(bankroll=300, bet=15, number_of_plays=25),
    "high": GameParams(bankroll=1000, bet=50, number_of_plays=50),
}

PRESET_LABELS: dict[str, str] = {
    "low": "Low Risk",
    "standard": "Standard",
    "high": "High Roller",
}


def parse_number(text: str) -> Amount:
    """Coerce a form field to a number.

    Integral values come back as ``int``. Empty or non-numeric text becomes
    NaN so the validator reports it as not a valid number.
    """
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        return math.nan
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def params_from_form(bankroll: str, bet: str, number_of_plays: str) -> GameParams:
    """Build GameParams from the raw text of the three form fields."""
    return GameParams(
        bankroll=parse_number(bankroll),
        bet=parse_number(bet),
        number_of_plays=parse_number(number_of_plays),
    )


def params_to_form(params: GameParams) -> dict[str, str]:
    """Inverse of :func:`params_from_form`, for pre-filling the inputs."""
    return {
        "bankroll": format_amount(params.bankroll),
        "bet": format_amount(params.bet),
        "number_of_plays": format_amount(params.number_of_plays),
    }
