"""End-to-end tests for the analysis pipeline."""

from __future__ import annotations

import json
import random

import pytest

from dssl.engine import analyze, analyze_raw
from dssl.engine.models import DailyInput
from dssl.engine.notes import NOTE_CALORIES_OVER, NOTE_STEPS_HIGH


class TestScenario:
    """A typical cutting day run through the whole pipeline."""

    def test_energy(self, scenario_raw) -> None:
        result = analyze_raw(scenario_raw)
        assert result.energy.bmr_kcal == 1853
        assert result.energy.activity_burn_kcal > 0
        assert result.energy.tdee_kcal == 1853 + result.energy.activity_burn_kcal
        assert result.energy.target_calories_kcal == 1827
        assert result.actual_calories_kcal == 2200

    def test_scores(self, scenario_raw) -> None:
        scores = analyze_raw(scenario_raw).scores
        assert scores.randle == 8
        assert scores.flexibility == 7
        assert scores.absorption == 9
        assert scores.meal_timing == 9
        assert scores.insulin == 8
        assert scores.metabolic_health_index == 8
        assert scores.recovery == 8
        assert scores.consistency == 5

    def test_forecast_and_notes(self, scenario_raw) -> None:
        result = analyze_raw(scenario_raw)
        assert len(result.forecast) == 7
        assert result.forecast.weight_kg[0] == pytest.approx(80.0)
        assert result.forecast.weight_kg[6] == pytest.approx(80.3)
        assert list(result.notes) == [NOTE_CALORIES_OVER, NOTE_STEPS_HIGH]


class TestTotality:
    """The pipeline never raises and always fills the record."""

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            {"height": "abc", "weight": "", "age": None},
            {"steps": "many", "calories": "-100", "sleep": "nan"},
            {"sex": 42, "goal": None, "eating_window": "all day"},
            {"height": "180", "weight": "1e308", "age": "30"},
            {"height": "180", "weight": "80", "steps": "1" + "0" * 400},
            {"height": "180", "weight": "80", "steps": "9" * 5000},
            {"fat": "1e308", "calories": "2000"},
        ],
    )
    def test_degraded_inputs(self, raw) -> None:
        result = analyze_raw(raw)
        data = result.to_dict()
        assert len(data["forecast"]["days"]) == 7
        assert 1 <= data["metabolic_health_index"] <= 10
        json.dumps(data, allow_nan=False)

    def test_idempotent(self, scenario_raw) -> None:
        """Identical input gives byte-identical output."""
        first = analyze_raw(scenario_raw).to_json()
        second = analyze_raw(dict(scenario_raw)).to_json()
        assert first == second

    def test_input_not_mutated(self, scenario_raw) -> None:
        before = dict(scenario_raw)
        analyze_raw(scenario_raw)
        assert scenario_raw == before


class TestProperties:
    """Randomized checks of pipeline invariants."""

    def test_random_inputs(self) -> None:
        rng = random.Random(2024)
        for _ in range(25):
            daily = DailyInput(
                height_cm=rng.uniform(150, 200),
                weight_kg=rng.uniform(45, 130),
                age_years=rng.uniform(18, 80),
                calories_kcal=rng.uniform(1000, 4000),
                protein_g=rng.uniform(0, 250),
                carbs_g=rng.uniform(0, 500),
                fat_g=rng.uniform(0, 150),
                steps=rng.randint(0, 25000),
                sleep_hours=rng.uniform(3, 10),
                eating_window_hours=rng.uniform(0, 20),
            )
            result = analyze(daily)
            scores = result.scores

            mean = sum(scores.sub_scores) / 5
            assert scores.metabolic_health_index == max(1, min(10, int(mean + 0.5)))

            target = result.energy.target_calories_kcal
            delta = (daily.calories_kcal - target) / 7700 if target > 0 else 0.0
            weights = result.forecast.weight_kg
            assert weights[6] - weights[0] == pytest.approx(6 * delta, abs=0.1)

    def test_to_dict_shape(self, scenario_input) -> None:
        data = analyze(scenario_input).to_dict()
        assert set(data) == {
            "metabolic_health_index",
            "sub_scores",
            "recovery_score",
            "consistency_score",
            "energy",
            "macros",
            "forecast",
            "notes",
        }
        assert set(data["sub_scores"]) == {
            "randle_cycle",
            "metabolic_flexibility",
            "micronutrient_absorption_proxy",
            "meal_timing",
            "insulin_sensitivity_proxy",
        }
        assert data["energy"]["recommended_calories_for_goal"] == 1827
