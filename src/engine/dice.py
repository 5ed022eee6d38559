"""
Craps Simulator - Dice Source

Produces two-dice throws from an injected random source so tests can replay
scripted or seeded sequences.
"""

import random
from typing import Protocol

from src.engine.base import DIE_FACES, DiceRoll


class RandomSource(Protocol):
    """Anything exposing ``random.Random.randint``."""

    def randint(self, a: int, b: int) -> int:
        ...


class DiceSource:
    """Rolls a pair of six-sided dice."""

    def __init__(self, rng: RandomSource | None = None, seed: int | None = None) -> None:
        """
        Initialize the dice source.

        Args:
            rng: Random source to draw faces from. When omitted a private
                ``random.Random`` is created, so separate sources never share
                the module-level generator.
            seed: Optional seed for the private generator (ignored if ``rng``
                is given)
        """
        self._rng = rng if rng is not None else random.Random(seed)

    def roll(self) -> DiceRoll:
        """
        Roll two dice.

        Returns:
            DiceRoll with both faces and their total
        """
        die1 = self._rng.randint(1, DIE_FACES)
        die2 = self._rng.randint(1, DIE_FACES)
        return DiceRoll.from_dice(die1, die2)
