"""Tests for src/ui/presets.py — presets and form coercion."""

import math

import pytest

from src.engine.base import GameParams
from src.engine.validators import validate_game_params
from src.ui.presets import (
    PRESET_LABELS,
    PRESETS,
    params_from_form,
    params_to_form,
    parse_number,
)


class TestPresets:
    def test_preset_values(self):
        assert PRESETS["low"] == GameParams(100, 5, 10)
        assert PRESETS["standard"] == GameParams(300, 15, 25)
        assert PRESETS["high"] == GameParams(1000, 50, 50)

    @pytest.mark.parametrize("key", ["low", "standard", "high"])
    def test_presets_are_valid(self, key):
        assert validate_game_params(PRESETS[key]).is_valid

    def test_every_preset_has_label(self):
        assert set(PRESET_LABELS) == set(PRESETS)
        assert PRESET_LABELS["high"] == "High Roller"


class TestParseNumber:
    @pytest.mark.parametrize("text,expected", [
        ("100", 100),
        (" 25 ", 25),
        ("12.5", 12.5),
        ("10.0", 10),
        ("-5", -5),
    ])
    def test_numbers(self, text, expected):
        value = parse_number(text)
        assert value == expected
        assert type(value) is type(expected)

    @pytest.mark.parametrize("text", ["", "   ", "abc", "1,000", None])
    def test_garbage_is_nan(self, text):
        assert math.isnan(parse_number(text))

    def test_infinity_passes_through(self):
        assert parse_number("inf") == math.inf


class TestFormConversion:
    def test_params_from_form(self):
        params = params_from_form("300", "15", "25")
        assert params == GameParams(300, 15, 25)

    def test_empty_field_fails_validation(self):
        params = params_from_form("", "15", "25")
        errors = validate_game_params(params).errors
        assert errors == {"bankroll": "Bankroll must be a valid number"}

    def test_fractional_plays_fail_validation(self):
        errors = validate_game_params(params_from_form("100", "5", "2.5")).errors
        assert errors["number_of_plays"] == "Number of plays must be a valid integer"

    def test_params_to_form(self):
        assert params_to_form(GameParams(100.0, 12.5, 10)) == {
            "bankroll": "100",
            "bet": "12.5",
            "number_of_plays": "10",
        }

    def test_form_round_trip(self):
        params = GameParams(300, 15, 25)
        assert params_from_form(*params_to_form(params).values()) == params
