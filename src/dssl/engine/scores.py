"""Heuristic metabolic scores.

Five independent sub-scores feed the Metabolic Health Index; recovery and
consistency are reported alongside it. Each score starts from a baseline,
adds independent adjustments, then is rounded and clamped into [1, 10].
A score whose prerequisites are missing returns its baseline.
"""

from __future__ import annotations

from typing import Optional

from dssl.engine.models import DailyInput, EnergyProfile, MacroProfile, ScoreSet
from dssl.engine.rounding import clamp_score

PROTEIN_TARGET_G_PER_KG = 1.6

HIGH_STEPS = 10000
LOW_STEPS = 4000


def protein_target_g(weight_kg: float) -> float:
    """Daily protein target in grams (0 when weight is unknown)."""
    return weight_kg * PROTEIN_TARGET_G_PER_KG if weight_kg else 0.0


def calorie_diff_ratio(actual_kcal: float, target_kcal: float) -> Optional[float]:
    """Relative distance of intake from target, or None if either is missing."""
    if target_kcal <= 0 or actual_kcal <= 0:
        return None
    return abs(actual_kcal - target_kcal) / target_kcal


def randle_score(daily: DailyInput, macros: MacroProfile) -> int:
    """Randle-cycle proxy: penalize meals mixing lots of carbs and fat."""
    total_grams = daily.protein_g + daily.carbs_g + daily.fat_g
    if not daily.calories_kcal or not total_grams:
        return 5

    carbs, fat = macros.carbs_share, macros.fat_share
    score = 7

    if carbs > 0.35 and fat > 0.35:
        score -= 3
    if carbs > 0.5 and fat > 0.3:
        score -= 1

    if macros.protein_share > 0.2:
        score += 1

    # Fuel-separated days
    if carbs > 0.5 and fat < 0.3:
        score += 1
    if fat > 0.5 and carbs < 0.3:
        score += 1

    return clamp_score(score)


def workout_bonus(workout: str) -> int:
    """Flexibility bonus for the optional workout description."""
    text = (workout or "").lower()
    if "run" in text or "interval" in text:
        return 2
    if "lift" in text or "weight" in text:
        return 1
    return 0


def flexibility_score(daily: DailyInput, energy: EnergyProfile) -> int:
    """Metabolic flexibility from movement, training and calorie adherence."""
    score = 5

    if daily.steps > HIGH_STEPS:
        score += 2
    elif daily.steps < LOW_STEPS:
        score -= 2

    score += workout_bonus(daily.workout)

    ratio = calorie_diff_ratio(daily.calories_kcal, energy.target_calories_kcal)
    if ratio is not None:
        if ratio < 0.1:
            score += 1
        elif ratio > 0.3:
            score -= 1

    return clamp_score(score)


def absorption_score(daily: DailyInput, macros: MacroProfile) -> int:
    """Micronutrient absorption proxy."""
    if not daily.calories_kcal:
        return 5
    score = 6

    protein_per_kg = daily.protein_g / daily.weight_kg if daily.weight_kg else 0.0
    if protein_per_kg >= 1.6:
        score += 2
    elif protein_per_kg < 0.8:
        score -= 2

    # Sugar-heavy days tend to be micronutrient-poor
    if macros.carbs_share > 0.6 and macros.fat_share < 0.2:
        score -= 1

    sleep = daily.sleep_hours
    if 7 <= sleep <= 9:
        score += 1
    elif sleep < 6:
        score -= 1

    return clamp_score(score)


def meal_timing_score(daily: DailyInput) -> int:
    """Score the eating window length in hours."""
    window = daily.eating_window_hours
    if window <= 0:
        return 5

    if 9 <= window <= 13:
        score = 9
    elif 7 <= window < 9:
        score = 8
    elif 13 < window <= 15:
        score = 6
    elif window > 15:
        score = 3
    elif 5 <= window < 7:
        score = 7
    else:
        score = 5

    if daily.sleep_hours < 6 and window > 14:
        score -= 1

    return clamp_score(score)


def insulin_score(daily: DailyInput) -> int:
    """Insulin sensitivity proxy from carb load, movement and sleep."""
    score = 6

    carbs_per_kg = daily.carbs_g / daily.weight_kg if daily.weight_kg else 0.0
    if 3 <= carbs_per_kg <= 5:
        score += 2
    elif carbs_per_kg > 6:
        score -= 2
    elif carbs_per_kg < 2:
        score -= 1

    if daily.steps > HIGH_STEPS:
        score += 1
    elif daily.steps < LOW_STEPS:
        score -= 1

    if daily.sleep_hours < 6:
        score -= 2
    elif daily.sleep_hours >= 8:
        score += 1

    return clamp_score(score)


def metabolic_health_index(sub_scores: tuple[int, ...]) -> int:
    """Mean of the sub-scores, rounded and clamped."""
    return clamp_score(sum(sub_scores) / len(sub_scores))


def recovery_score(daily: DailyInput, energy: EnergyProfile) -> int:
    """Recovery from sleep, discounted for heavy activity on short sleep."""
    score = 7
    sleep = daily.sleep_hours
    burn = energy.activity_burn_kcal

    if sleep < 6:
        score -= 3
    elif 7 <= sleep <= 9:
        score += 1

    if burn > 800 and sleep < 7:
        score -= 1
    if burn < 300 and sleep >= 7:
        score += 1

    return clamp_score(score)


def consistency_score(daily: DailyInput, energy: EnergyProfile) -> int:
    """Adherence to the calorie target and the protein target."""
    score = 5

    ratio = calorie_diff_ratio(daily.calories_kcal, energy.target_calories_kcal)
    if ratio is not None:
        if ratio < 0.05:
            score += 3
        elif ratio < 0.15:
            score += 1
        elif ratio > 0.3:
            score -= 2

    target = protein_target_g(daily.weight_kg)
    if target and daily.protein_g > 0:
        protein_ratio = abs(daily.protein_g - target) / target
        if protein_ratio < 0.1:
            score += 2
        elif protein_ratio > 0.3:
            score -= 2

    return clamp_score(score)


def calculate_scores(
    daily: DailyInput,
    energy: EnergyProfile,
    macros: MacroProfile,
) -> ScoreSet:
    """Run every score function and assemble the ScoreSet."""
    randle = randle_score(daily, macros)
    flexibility = flexibility_score(daily, energy)
    absorption = absorption_score(daily, macros)
    timing = meal_timing_score(daily)
    insulin = insulin_score(daily)

    return ScoreSet(
        randle=randle,
        flexibility=flexibility,
        absorption=absorption,
        meal_timing=timing,
        insulin=insulin,
        metabolic_health_index=metabolic_health_index(
            (randle, flexibility, absorption, timing, insulin)
        ),
        recovery=recovery_score(daily, energy),
        consistency=consistency_score(daily, energy),
    )
