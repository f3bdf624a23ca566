"""Tests for raw input normalization."""

from __future__ import annotations

import pytest

from dssl.engine.inputs import (
    normalize_input,
    parse_goal,
    parse_number,
    parse_sex,
    parse_steps,
)
from dssl.engine.models import DailyInput, Goal, Sex


class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("80", 80.0),
            ("80.5", 80.5),
            ("  72 ", 72.0),
            ("80kg", 80.0),
            ("1e3", 1000.0),
            (".5", 0.5),
            (65, 65.0),
            (65.5, 65.5),
        ],
    )
    def test_valid_values(self, raw, expected) -> None:
        """Leading numeric text and plain numbers should parse."""
        assert parse_number(raw) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "raw",
        [
            "", "abc", "kg80", None, "-5", -3.0, float("nan"), float("inf"), "nan", True,
            "1e308", "2e15", 10**400,
        ],
    )
    def test_invalid_values_default_to_zero(self, raw) -> None:
        """Unparsable, non-finite, negative and oversized values become 0."""
        assert parse_number(raw) == 0.0


class TestParseSteps:
    """Tests for parse_steps."""

    def test_strips_separators(self) -> None:
        """Thousands separators and spaces are dropped."""
        assert parse_steps("12,000") == 12000
        assert parse_steps("8 500") == 8500

    def test_strips_every_non_digit(self) -> None:
        """All non-digit characters are removed, not just separators."""
        assert parse_steps("12k steps") == 12
        assert parse_steps("1.5") == 15

    def test_empty_is_zero(self) -> None:
        """Empty or digit-free input means zero steps."""
        assert parse_steps("") == 0
        assert parse_steps("lots") == 0
        assert parse_steps(None) == 0

    def test_numbers(self) -> None:
        """Numeric input is truncated to an int; negatives are zero."""
        assert parse_steps(9000) == 9000
        assert parse_steps(9000.7) == 9000
        assert parse_steps(-10) == 0

    def test_huge_counts_are_zero(self) -> None:
        """Counts too long for int() or float() degrade to zero."""
        assert parse_steps("1" + "0" * 400) == 0
        assert parse_steps("9" * 5000) == 0
        assert parse_steps(10**400) == 0
        assert parse_steps(float("inf")) == 0


class TestParseEnums:
    """Tests for sex and goal parsing."""

    def test_sex_case_insensitive(self) -> None:
        assert parse_sex("FEMALE") == Sex.FEMALE
        assert parse_sex(" male ") == Sex.MALE

    def test_unknown_sex_is_male(self) -> None:
        assert parse_sex("other") == Sex.MALE
        assert parse_sex(None) == Sex.MALE

    def test_goal(self) -> None:
        assert parse_goal("Bulk") == Goal.BULK
        assert parse_goal(Goal.CUT) == Goal.CUT

    def test_unknown_goal_is_recomp(self) -> None:
        assert parse_goal("shred") == Goal.RECOMP
        assert parse_goal("") == Goal.RECOMP


class TestNormalizeInput:
    """Tests for normalize_input."""

    def test_form_names(self, scenario_raw, scenario_input) -> None:
        """Short form field names map onto DailyInput."""
        assert normalize_input(scenario_raw) == scenario_input

    def test_canonical_names(self) -> None:
        """Canonical field names are accepted too."""
        daily = normalize_input({"height_cm": "170", "eating_window_hours": "8"})
        assert daily.height_cm == 170.0
        assert daily.eating_window_hours == 8.0

    def test_empty_mapping_gives_defaults(self) -> None:
        """Missing fields take their defaults."""
        assert normalize_input({}) == DailyInput()

    def test_unknown_keys_ignored(self) -> None:
        """Extra keys do not raise."""
        daily = normalize_input({"weight": "70", "mood": "great"})
        assert daily.weight_kg == 70.0

    def test_workout_kept_as_text(self) -> None:
        daily = normalize_input({"workout": "Intervals"})
        assert daily.workout == "Intervals"
