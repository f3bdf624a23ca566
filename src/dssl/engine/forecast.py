"""Seven-day weight and body-fat projection.

A straight line from today's weight, sloped by today's calorie surplus or
deficit against the goal target. It is an illustration of where repeated
identical days would lead, not a biological model.
"""

from __future__ import annotations

import numpy as np

from dssl.engine.models import DailyInput, EnergyProfile, Forecast, Sex
from dssl.engine.rounding import round_one_decimal

FORECAST_DAYS = 7
KCAL_PER_KG = 7700

# Starting body-fat percentage by sex; no body-fat input is collected
BODY_FAT_BASELINE = {
    Sex.MALE: 15.0,
    Sex.FEMALE: 24.0,
}
# Body-fat change is exaggerated so the trend is visible on a chart
BODY_FAT_VISIBILITY_SCALE = 8


def daily_weight_delta(calories_kcal: float, target_calories_kcal: int) -> float:
    """Projected kg change per day (0 without a calorie target)."""
    if target_calories_kcal <= 0:
        return 0.0
    return (calories_kcal - target_calories_kcal) / KCAL_PER_KG


def generate_forecast(daily: DailyInput, energy: EnergyProfile) -> Forecast:
    """Project weight and body fat for the next seven days.

    Args:
        daily: Normalized daily input
        energy: Energy profile for the same day

    Returns:
        Forecast with exactly seven points
    """
    delta = daily_weight_delta(daily.calories_kcal, energy.target_calories_kcal)
    steps = np.arange(1, FORECAST_DAYS + 1)

    weights = daily.weight_kg + delta * steps
    body_fat = BODY_FAT_BASELINE[daily.sex] + delta * steps * BODY_FAT_VISIBILITY_SCALE

    return Forecast(
        days=tuple(f"Day {i}" for i in steps.tolist()),
        weight_kg=tuple(round_one_decimal(w) for w in weights.tolist()),
        body_fat_pct=tuple(round_one_decimal(b) for b in body_fat.tolist()),
    )
