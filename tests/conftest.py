"""
Craps Simulator - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Iterable

import pytest

from src.engine.base import GameParams
from src.engine.dice import DiceSource


class ScriptedRandom:
    """Random source that replays a fixed list of die faces."""

    def __init__(self, faces: Iterable[int]) -> None:
        self.faces = list(faces)
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        if self.calls >= len(self.faces):
            raise AssertionError("Scripted dice ran out of faces.")
        value = self.faces[self.calls]
        self.calls += 1
        if not a <= value <= b:
            raise AssertionError(
                f"Scripted face {value} at draw {self.calls} is outside {a}..{b}."
            )
        return value


# =============================================================================
# DICE FIXTURES
# =============================================================================

@pytest.fixture
def scripted_dice() -> Callable[..., DiceSource]:
    """
    Factory for a DiceSource that throws the given pairs in order.

    Usage: ``scripted_dice((3, 4), (1, 1))``
    """
    def _make(*pairs: tuple[int, int]) -> DiceSource:
        faces = [face for pair in pairs for face in pair]
        return DiceSource(rng=ScriptedRandom(faces))
    return _make


@pytest.fixture
def seeded_dice() -> DiceSource:
    """Deterministic dice for statistical property checks."""
    return DiceSource(seed=1234)


# =============================================================================
# ROLL TEST DATA
# =============================================================================

@pytest.fixture
def come_out_outcomes() -> dict[str, tuple[tuple[int, int], str]]:
    """
    Come-out pairs with the phase they lead to.

    Returns:
        Dict mapping name to (dice_pair, expected_phase_value)
    """
    return {
        "natural_seven": ((3, 4), "won"),
        "natural_eleven": ((5, 6), "won"),
        "craps_two": ((1, 1), "lost"),
        "craps_three": ((1, 2), "lost"),
        "craps_twelve": ((6, 6), "lost"),
        "point_four": ((2, 2), "point"),
        "point_five": ((2, 3), "point"),
        "point_six": ((3, 3), "point"),
        "point_eight": ((4, 4), "point"),
        "point_nine": ((4, 5), "point"),
        "point_ten": ((5, 5), "point"),
    }


# =============================================================================
# GAME PARAMS FIXTURES
# =============================================================================

@pytest.fixture
def valid_params() -> GameParams:
    return GameParams(bankroll=100, bet=10, number_of_plays=5)
