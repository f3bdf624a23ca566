"""Pytest fixtures for dssl tests."""

from __future__ import annotations

import pytest

import dssl.config.settings as settings_module
from dssl.engine.models import DailyInput, EnergyProfile, Goal, Sex


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp dir and drop any cached settings."""
    config_path = tmp_path / "config.yaml"
    monkeypatch.setenv(settings_module.CONFIG_ENV_VAR, str(config_path))
    monkeypatch.setattr(settings_module, "_settings", None)
    return config_path


@pytest.fixture
def scenario_raw() -> dict:
    """Raw form values for a typical cutting day."""
    return {
        "height": "180",
        "weight": "80",
        "age": "30",
        "sex": "male",
        "goal": "cut",
        "calories": "2200",
        "protein": "160",
        "carbs": "200",
        "fat": "70",
        "steps": "12,000",
        "sleep": "8",
        "eating_window": "10",
    }


@pytest.fixture
def scenario_input() -> DailyInput:
    """Normalized version of scenario_raw."""
    return DailyInput(
        height_cm=180,
        weight_kg=80,
        age_years=30,
        sex=Sex.MALE,
        goal=Goal.CUT,
        calories_kcal=2200,
        protein_g=160,
        carbs_g=200,
        fat_g=70,
        steps=12000,
        sleep_hours=8,
        eating_window_hours=10,
    )


@pytest.fixture
def known_target() -> EnergyProfile:
    """Energy profile with a round 2000 kcal target and no activity."""
    return EnergyProfile(
        bmr_kcal=2000,
        activity_burn_kcal=0,
        tdee_kcal=2000,
        target_calories_kcal=2000,
    )
