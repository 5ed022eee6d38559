"""
Craps Simulator - Game Orchestrator

Plays up to ``number_of_plays`` rounds against a single bankroll, narrating
each event into an ordered log. Stopping early for lack of funds is a normal
end of the run, not an error.
"""

import logging

from src.engine.base import (
    CRAPS,
    NATURALS,
    SEVEN,
    Amount,
    GameLogEntry,
    GameParams,
    GameResult,
    GameRound,
    LogEntryType,
    format_amount,
)
from src.engine.craps import CrapsEngine
from src.engine.dice import DiceSource
from src.engine.errors import InvalidGameParametersError
from src.engine.validators import validate_game_params

logger = logging.getLogger(__name__)


def _narrate_round(game_round: GameRound) -> list[GameLogEntry]:
    """Log entries for every roll of a round, in the order they happened."""
    entries: list[GameLogEntry] = []
    come_out = game_round.come_out_roll

    entries.append(GameLogEntry(
        type=LogEntryType.ROLL,
        message=f"Come out roll: {come_out}",
        roll=come_out,
    ))
    if come_out.total in NATURALS:
        entries.append(GameLogEntry(
            type=LogEntryType.WIN,
            message=f"Natural {come_out.total}! You win!",
        ))
    elif come_out.total in CRAPS:
        entries.append(GameLogEntry(
            type=LogEntryType.LOSE,
            message="Craps! You lose.",
        ))
    elif game_round.point is not None:
        entries.append(GameLogEntry(
            type=LogEntryType.POINT_SET,
            message=f"Point is set to {game_round.point}",
            point=game_round.point,
        ))

    for roll in game_round.rolls[1:]:
        entries.append(GameLogEntry(
            type=LogEntryType.ROLL,
            message=f"Roll: {roll}",
            roll=roll,
        ))
        if roll.total == game_round.point:
            entries.append(GameLogEntry(
                type=LogEntryType.WIN,
                message=f"Matched the point {game_round.point}! You win!",
            ))
        elif roll.total == SEVEN:
            entries.append(GameLogEntry(
                type=LogEntryType.LOSE,
                message="Rolled 7. You lose.",
            ))

    return entries


def _final_summary(
    games_played: int,
    initial: Amount,
    final: Amount,
    total_won: Amount,
    total_lost: Amount,
) -> GameLogEntry:
    if total_won > 0:
        verdict = f"Won {format_amount(total_won)}"
    elif total_lost > 0:
        verdict = f"Lost {format_amount(total_lost)}"
    else:
        verdict = "Broke even"
    return GameLogEntry(
        type=LogEntryType.GAME_END,
        message=(
            f"Final results: Played {games_played} games. "
            f"Started with {format_amount(initial)}, "
            f"ended with {format_amount(final)}. {verdict}"
        ),
        bankroll=final,
    )


def play_game(params: GameParams, dice: DiceSource | None = None) -> GameResult:
    """
    Simulate a complete run.

    Args:
        params: Bankroll, bet and number of plays
        dice: Dice source for the whole run (a fresh, unseeded source if
            omitted)

    Returns:
        GameResult with every round, the full event log and the net
        won/lost amounts

    Raises:
        InvalidGameParametersError: If ``params`` fail validation. No round
            is played.
    """
    validation = validate_game_params(params)
    if not validation.is_valid:
        raise InvalidGameParametersError(validation.errors)

    if dice is None:
        dice = DiceSource()

    initial = params.bankroll
    bet = params.bet
    current = initial
    rounds: list[GameRound] = []
    log: list[GameLogEntry] = []
    games_played = 0

    for _ in range(int(params.number_of_plays)):
        if current < bet:
            logger.debug("Stopping after %d game(s): bankroll %s below bet %s",
                         games_played, current, bet)
            log.append(GameLogEntry(
                type=LogEntryType.GAME_END,
                message=(
                    f"Game ended: Insufficient bankroll ({format_amount(current)}) "
                    f"for bet ({format_amount(bet)})"
                ),
                bankroll=current,
            ))
            break

        current -= bet
        games_played += 1
        log.append(GameLogEntry(
            type=LogEntryType.GAME_START,
            message=(
                f"Game {games_played} started. Bet: {format_amount(bet)}, "
                f"Bankroll after bet: {format_amount(current)}"
            ),
            bankroll=current,
        ))

        game_round = CrapsEngine.play_round(bet, dice)
        rounds.append(game_round)
        log.extend(_narrate_round(game_round))

        current += game_round.winnings
        log.append(GameLogEntry(
            type=LogEntryType.WIN if game_round.won else LogEntryType.LOSE,
            message=(
                f"Game {games_played} {'won' if game_round.won else 'lost'}. "
                f"Winnings: {format_amount(game_round.winnings)}. "
                f"Bankroll: {format_amount(current)}"
            ),
            bankroll=current,
        ))

    # Net delta over the whole run, not a sum of per-round swings
    total_won = max(0, current - initial)
    total_lost = max(0, initial - current)

    log.append(_final_summary(games_played, initial, current, total_won, total_lost))

    return GameResult(
        initial_bankroll=initial,
        final_bankroll=current,
        total_won=total_won,
        total_lost=total_lost,
        games_played=games_played,
        rounds=tuple(rounds),
        log=tuple(log),
    )
