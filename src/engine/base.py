"""
Craps Simulator - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so a finished
round or run can be handed to the display layer without defensive copies.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Union

Amount = Union[int, float]

DIE_FACES = 6

NATURALS = frozenset({7, 11})
CRAPS = frozenset({2, 3, 12})
POINT_NUMBERS = frozenset({4, 5, 6, 8, 9, 10})
SEVEN = 7

PAYOUT_MULTIPLIER = 2


def format_amount(amount: Amount) -> str:
    """Render an amount for log messages, dropping a trailing ``.0``."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


class RoundPhase(Enum):
    """Phases of the come-out / point-chase state machine."""
    COME_OUT = "come_out"
    POINT = "point"
    WON = "won"     # terminal
    LOST = "lost"   # terminal


class LogEntryType(Enum):
    """Kinds of user-visible events recorded in the game log."""
    ROLL = "roll"
    POINT_SET = "point"
    WIN = "win"
    LOSE = "lose"
    GAME_START = "game-start"
    GAME_END = "game-end"


class GameOutcome(Enum):
    """Net outcome of a complete run."""
    WON = "won"
    LOST = "lost"
    BROKE_EVEN = "broke_even"


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a two-dice throw.

    Attributes:
        die1: Face of the first die (1-6)
        die2: Face of the second die (1-6)
        total: Sum of both faces (2-12)
    """
    die1: int
    die2: int
    total: int

    def __post_init__(self) -> None:
        """Validate faces are within range and the total is consistent."""
        for value in (self.die1, self.die2):
            if not (1 <= value <= DIE_FACES):
                raise ValueError(
                    f"Invalid die value {value}. "
                    f"Must be between 1 and {DIE_FACES}."
                )
        if self.total != self.die1 + self.die2:
            raise ValueError(
                f"Total {self.total} does not match dice "
                f"{self.die1} + {self.die2}."
            )

    @classmethod
    def from_dice(cls, die1: int, die2: int) -> "DiceRoll":
        """Create a DiceRoll from two faces, computing the total."""
        return cls(die1=die1, die2=die2, total=die1 + die2)

    def __str__(self) -> str:
        return f"{self.die1} + {self.die2} = {self.total}"


@dataclass(frozen=True)
class RoundState:
    """
    Position of a round in the come-out / point-chase state machine.

    Attributes:
        phase: Current phase
        point: The established point (only set once the come-out roll
            neither won nor lost)
    """
    phase: RoundPhase = RoundPhase.COME_OUT
    point: int | None = None

    @property
    def is_terminal(self) -> bool:
        """Returns True once the round has been won or lost."""
        return self.phase in (RoundPhase.WON, RoundPhase.LOST)


@dataclass(frozen=True)
class GameRound:
    """
    One complete round: come-out roll plus any point-chase rolls.

    Attributes:
        rolls: Every roll of the round in chronological order
        point: Point established by the come-out roll, if any
        won: Whether the round was won
        winnings: Amount paid back (twice the bet on a win, 0 on a loss)
    """
    rolls: tuple[DiceRoll, ...]
    point: int | None
    won: bool
    winnings: Amount

    @property
    def come_out_roll(self) -> DiceRoll:
        """The first roll of the round."""
        return self.rolls[0]

    @property
    def resolved_on_come_out(self) -> bool:
        """Returns True if the come-out roll decided the round."""
        return len(self.rolls) == 1


@dataclass(frozen=True)
class GameLogEntry:
    """
    A single user-visible event of a run.

    The typed fields are authoritative; ``message`` is narration for display
    and should never be parsed.

    Attributes:
        type: Kind of event
        message: Human-readable narration
        roll: Triggering dice roll (roll entries)
        point: Point value (point-set entries)
        bankroll: Bankroll snapshot at that moment
    """
    type: LogEntryType
    message: str
    roll: DiceRoll | None = None
    point: int | None = None
    bankroll: Amount | None = None


@dataclass(frozen=True)
class GameParams:
    """
    Configuration for a simulation run.

    Attributes:
        bankroll: Starting bankroll
        bet: Fixed wager per round
        number_of_plays: Maximum number of rounds to play
    """
    bankroll: Amount
    bet: Amount
    number_of_plays: Amount


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a GameParams.

    Attributes:
        errors: Field name to message for every offending field
    """
    errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """Returns True when no field reported an error."""
        return len(self.errors) == 0


@dataclass(frozen=True)
class GameResult:
    """
    Aggregate output of one full run.

    Attributes:
        initial_bankroll: Bankroll before the first bet
        final_bankroll: Bankroll after the last round
        total_won: Net gain over the run (0 unless final > initial)
        total_lost: Net loss over the run (0 unless final < initial)
        games_played: Rounds actually played
        rounds: Every round played, in order
        log: Every event of the run, in order
    """
    initial_bankroll: Amount
    final_bankroll: Amount
    total_won: Amount
    total_lost: Amount
    games_played: int
    rounds: tuple[GameRound, ...]
    log: tuple[GameLogEntry, ...]

    @property
    def net(self) -> Amount:
        """Signed change in bankroll over the run."""
        return self.final_bankroll - self.initial_bankroll

    @property
    def outcome(self) -> GameOutcome:
        if self.total_won > 0:
            return GameOutcome.WON
        if self.total_lost > 0:
            return GameOutcome.LOST
        return GameOutcome.BROKE_EVEN

    @property
    def rounds_won(self) -> int:
        return sum(1 for r in self.rounds if r.won)

    @property
    def rounds_lost(self) -> int:
        return sum(1 for r in self.rounds if not r.won)

    @property
    def total_rolls(self) -> int:
        """Number of dice throws across all rounds."""
        return sum(len(r.rolls) for r in self.rounds)
