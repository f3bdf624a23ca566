"""Tests for the 7-day forecast."""

from __future__ import annotations

import pytest

from dssl.engine.forecast import daily_weight_delta, generate_forecast
from dssl.engine.models import DailyInput, EnergyProfile, Forecast, Sex


class TestDailyWeightDelta:
    """Tests for daily_weight_delta."""

    def test_surplus(self) -> None:
        assert daily_weight_delta(2770, 2000) == pytest.approx(0.1)

    def test_deficit(self) -> None:
        assert daily_weight_delta(1230, 2000) == pytest.approx(-0.1)

    def test_no_target(self) -> None:
        assert daily_weight_delta(3000, 0) == 0.0


class TestGenerateForecast:
    """Tests for generate_forecast."""

    def test_seven_points(self, known_target) -> None:
        forecast = generate_forecast(DailyInput(weight_kg=80, calories_kcal=2500), known_target)
        assert len(forecast) == 7
        assert forecast.days == tuple(f"Day {i}" for i in range(1, 8))
        assert len(forecast.weight_kg) == 7
        assert len(forecast.body_fat_pct) == 7

    def test_linear_weight(self, known_target) -> None:
        """A 770 kcal surplus adds 0.1 kg per day."""
        forecast = generate_forecast(
            DailyInput(weight_kg=80, calories_kcal=2770), known_target
        )
        assert forecast.weight_kg == pytest.approx(
            (80.1, 80.2, 80.3, 80.4, 80.5, 80.6, 80.7)
        )
        assert forecast.weight_kg[6] - forecast.weight_kg[0] == pytest.approx(0.6, abs=0.1)

    def test_body_fat_scaled(self, known_target) -> None:
        """Body fat moves 8x the weight delta from the sex baseline."""
        male = generate_forecast(
            DailyInput(weight_kg=80, calories_kcal=1230, sex=Sex.MALE), known_target
        )
        female = generate_forecast(
            DailyInput(weight_kg=60, calories_kcal=2770, sex=Sex.FEMALE), known_target
        )
        assert male.body_fat_pct[0] == pytest.approx(14.2)
        assert male.body_fat_pct[6] == pytest.approx(9.4)
        assert female.body_fat_pct[0] == pytest.approx(24.8)

    def test_flat_without_target(self) -> None:
        """No calorie target: nothing changes."""
        no_target = EnergyProfile(0, 0, 0, 0)
        forecast = generate_forecast(
            DailyInput(weight_kg=72.34, calories_kcal=3000, sex=Sex.FEMALE), no_target
        )
        assert set(forecast.weight_kg) == {72.3}
        assert set(forecast.body_fat_pct) == {24.0}

    def test_ties_round_half_up(self) -> None:
        """80.25 is exact in binary and rounds up, not to even."""
        forecast = generate_forecast(DailyInput(weight_kg=80.25), EnergyProfile(0, 0, 0, 0))
        assert forecast.weight_kg == (80.3,) * 7

    def test_values_are_plain_floats(self, known_target) -> None:
        forecast = generate_forecast(DailyInput(weight_kg=80, calories_kcal=2500), known_target)
        assert all(type(v) is float for v in forecast.weight_kg)
        assert all(type(d) is str for d in forecast.days)

    def test_empty_before_analysis(self) -> None:
        assert len(Forecast.empty()) == 0
