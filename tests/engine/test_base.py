"""
Craps Simulator - Base Classes Tests

Tests for dataclasses, enums, and formatting helpers.
"""

import dataclasses

import pytest
from src.engine.base import (
    CRAPS,
    NATURALS,
    POINT_NUMBERS,
    DiceRoll,
    GameLogEntry,
    GameOutcome,
    GameResult,
    GameRound,
    LogEntryType,
    RoundPhase,
    RoundState,
    ValidationResult,
    format_amount,
)


class TestRollTables:
    """The three come-out groups cover every total exactly once."""

    def test_groups_are_disjoint(self):
        assert not (NATURALS & CRAPS)
        assert not (NATURALS & POINT_NUMBERS)
        assert not (CRAPS & POINT_NUMBERS)

    def test_groups_cover_all_totals(self):
        assert NATURALS | CRAPS | POINT_NUMBERS == set(range(2, 13))


class TestLogEntryType:
    """Tests for LogEntryType enum."""

    def test_values(self):
        assert {t.value for t in LogEntryType} == {
            "roll", "point", "win", "lose", "game-start", "game-end",
        }


class TestDiceRoll:
    """Tests for DiceRoll dataclass."""

    def test_from_dice_computes_total(self):
        roll = DiceRoll.from_dice(3, 4)
        assert roll.die1 == 3
        assert roll.die2 == 4
        assert roll.total == 7

    def test_str(self):
        assert str(DiceRoll.from_dice(2, 6)) == "2 + 6 = 8"

    @pytest.mark.parametrize("die1,die2", [(0, 1), (1, 7), (-1, 3), (3, 0)])
    def test_invalid_face_raises(self, die1, die2):
        with pytest.raises(ValueError, match="Invalid die value"):
            DiceRoll.from_dice(die1, die2)

    def test_inconsistent_total_raises(self):
        with pytest.raises(ValueError, match="does not match"):
            DiceRoll(die1=2, die2=3, total=6)

    def test_is_immutable(self):
        roll = DiceRoll.from_dice(1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            roll.total = 3


class TestRoundState:
    """Tests for RoundState dataclass."""

    def test_defaults_to_come_out(self):
        state = RoundState()
        assert state.phase == RoundPhase.COME_OUT
        assert state.point is None
        assert state.is_terminal is False

    def test_point_phase_not_terminal(self):
        assert RoundState(RoundPhase.POINT, point=6).is_terminal is False

    @pytest.mark.parametrize("phase", [RoundPhase.WON, RoundPhase.LOST])
    def test_won_and_lost_are_terminal(self, phase):
        assert RoundState(phase).is_terminal is True


class TestGameRound:
    """Tests for GameRound dataclass."""

    def test_come_out_properties(self):
        rnd = GameRound(rolls=(DiceRoll.from_dice(5, 6),), point=None, won=True, winnings=20)
        assert rnd.come_out_roll.total == 11
        assert rnd.resolved_on_come_out is True

    def test_point_round_not_resolved_on_come_out(self):
        rnd = GameRound(
            rolls=(DiceRoll.from_dice(2, 2), DiceRoll.from_dice(3, 4)),
            point=4,
            won=False,
            winnings=0,
        )
        assert rnd.resolved_on_come_out is False
        assert rnd.come_out_roll.total == 4


class TestGameLogEntry:
    """Tests for GameLogEntry dataclass."""

    def test_optional_fields_default_to_none(self):
        entry = GameLogEntry(type=LogEntryType.LOSE, message="Craps! You lose.")
        assert entry.roll is None
        assert entry.point is None
        assert entry.bankroll is None


class TestValidationResult:
    """Tests for ValidationResult dataclass."""

    def test_empty_errors_is_valid(self):
        assert ValidationResult().is_valid is True

    def test_any_error_is_invalid(self):
        result = ValidationResult(errors={"bet": "Bet must be at least 5"})
        assert result.is_valid is False


def _result(initial, final, rounds=()):
    return GameResult(
        initial_bankroll=initial,
        final_bankroll=final,
        total_won=max(0, final - initial),
        total_lost=max(0, initial - final),
        games_played=len(rounds),
        rounds=tuple(rounds),
        log=(),
    )


class TestGameResult:
    """Tests for derived GameResult properties."""

    def test_outcome_won(self):
        result = _result(100, 130)
        assert result.outcome == GameOutcome.WON
        assert result.net == 30

    def test_outcome_lost(self):
        result = _result(100, 70)
        assert result.outcome == GameOutcome.LOST
        assert result.net == -30

    def test_outcome_broke_even(self):
        assert _result(100, 100).outcome == GameOutcome.BROKE_EVEN

    def test_round_counts(self):
        won = GameRound(rolls=(DiceRoll.from_dice(3, 4),), point=None, won=True, winnings=20)
        lost = GameRound(
            rolls=(DiceRoll.from_dice(4, 4), DiceRoll.from_dice(6, 1)),
            point=8,
            won=False,
            winnings=0,
        )
        result = _result(100, 100, rounds=(won, lost))
        assert result.rounds_won == 1
        assert result.rounds_lost == 1
        assert result.total_rolls == 3


class TestFormatAmount:
    """Tests for format_amount()."""

    @pytest.mark.parametrize("amount,expected", [
        (100, "100"),
        (100.0, "100"),
        (12.5, "12.5"),
        (0, "0"),
    ])
    def test_format(self, amount, expected):
        assert format_amount(amount) == expected
