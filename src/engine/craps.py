"""
Craps Simulator - Round Engine

A round starts with the come-out roll: 7 or 11 wins, 2, 3 or 12 loses, and
any other total becomes the point. The shooter then rolls until the point
repeats (win) or a 7 shows (loss).

All methods are stateless class methods operating on immutable data.
"""

import logging

from src.engine.base import (
    CRAPS,
    NATURALS,
    PAYOUT_MULTIPLIER,
    SEVEN,
    Amount,
    DiceRoll,
    GameRound,
    RoundPhase,
    RoundState,
)
from src.engine.dice import DiceSource
from src.engine.validators import validate_bet

logger = logging.getLogger(__name__)


class CrapsEngine:
    """
    Stateless engine for a single craps round.

    State is passed in and returned, never stored.
    """

    @classmethod
    def roll_dice(cls, dice: DiceSource | None = None) -> DiceRoll:
        """Roll two dice from ``dice`` (a fresh source if omitted)."""
        if dice is None:
            dice = DiceSource()
        return dice.roll()

    @classmethod
    def advance(cls, state: RoundState, roll: DiceRoll) -> RoundState:
        """Apply one roll to the round state machine.

        Args:
            state: Current (non-terminal) round state
            roll: The roll just thrown

        Returns:
            The next RoundState

        Raises:
            ValueError: If the round is already resolved
        """
        if state.phase == RoundPhase.COME_OUT:
            if roll.total in NATURALS:
                return RoundState(RoundPhase.WON)
            if roll.total in CRAPS:
                return RoundState(RoundPhase.LOST)
            return RoundState(RoundPhase.POINT, point=roll.total)

        if state.phase == RoundPhase.POINT:
            if roll.total == state.point:
                return RoundState(RoundPhase.WON, point=state.point)
            if roll.total == SEVEN:
                return RoundState(RoundPhase.LOST, point=state.point)
            return state

        raise ValueError(f"Round already resolved ({state.phase.value}).")

    @classmethod
    def calculate_winnings(cls, bet: Amount, won: bool) -> Amount:
        """Winnings for a resolved round: the bet doubled on a win, else 0."""
        return bet * PAYOUT_MULTIPLIER if won else 0

    @classmethod
    def play_round(cls, bet: Amount, dice: DiceSource | None = None) -> GameRound:
        """Play one complete round.

        Args:
            bet: Amount wagered; must be a finite number above zero
            dice: Dice source to draw from (a fresh source if omitted)

        Returns:
            GameRound with every roll, the point (if one was set) and
            the winnings

        Raises:
            InvalidBetError: If the bet is invalid. No dice are drawn.
        """
        validate_bet(bet)
        if dice is None:
            dice = DiceSource()

        rolls: list[DiceRoll] = []
        state = RoundState()
        while not state.is_terminal:
            roll = dice.roll()
            rolls.append(roll)
            state = cls.advance(state, roll)

        won = state.phase == RoundPhase.WON
        logger.debug(
            "Round %s after %d roll(s) (point=%s)",
            state.phase.value, len(rolls), state.point,
        )
        return GameRound(
            rolls=tuple(rolls),
            point=state.point,
            won=won,
            winnings=cls.calculate_winnings(bet, won),
        )
