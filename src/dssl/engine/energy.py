"""Energy expenditure estimates.

BMR uses the revised Harris-Benedict coefficients. Activity burn is derived
from the daily step count: stride length from height, a fixed walking
speed ratio, a MET value picked from that speed, and the ACSM
kcal = minutes x MET x 3.5 x kg / 200 formula.
"""

from __future__ import annotations

import logging

from dssl.engine.models import DailyInput, EnergyProfile, Goal, Sex
from dssl.engine.rounding import round_half_up

logger = logging.getLogger(__name__)

# Calorie target multipliers applied to TDEE
GOAL_MULTIPLIERS = {
    Goal.CUT: 0.80,      # 20% deficit
    Goal.BULK: 1.12,     # 12% surplus
    Goal.RECOMP: 0.94,   # mild deficit
}

STRIDE_HEIGHT_RATIO = 0.414  # stride length / height
STRIDE_SPEED_RATIO = 0.55    # stride length / walking speed (seconds per stride)


def calculate_bmr(
    weight_kg: float,
    height_cm: float,
    age_years: float,
    sex: Sex,
) -> float:
    """Calculate Basal Metabolic Rate.

    Args:
        weight_kg: Body weight in kg
        height_cm: Height in cm
        age_years: Age in years
        sex: Biological sex

    Returns:
        BMR in kcal/day, or 0 if any measurement is missing
    """
    if not height_cm or not weight_kg or not age_years:
        return 0.0

    if sex == Sex.MALE:
        return 88.36 + 13.4 * weight_kg + 4.8 * height_cm - 5.7 * age_years
    return 447.6 + 9.2 * weight_kg + 3.1 * height_cm - 4.3 * age_years


def met_for_speed(speed_m_s: float) -> float:
    """MET value for a walking speed in m/s."""
    if speed_m_s < 1.3:
        return 2.0
    if speed_m_s < 1.5:
        return 2.8
    if speed_m_s < 1.7:
        return 3.5
    if speed_m_s < 1.9:
        return 4.3
    return 5.0


def estimate_activity_burn(steps: int, height_cm: float, weight_kg: float) -> int:
    """Estimate calories burned walking the given number of steps.

    Args:
        steps: Daily step count
        height_cm: Height in cm
        weight_kg: Body weight in kg

    Returns:
        kcal burned, rounded; 0 if steps, height or weight is 0
    """
    if steps == 0 or height_cm == 0 or weight_kg == 0:
        return 0

    stride_m = height_cm / 100 * STRIDE_HEIGHT_RATIO
    distance_m = stride_m * steps
    speed_m_s = stride_m / STRIDE_SPEED_RATIO
    time_minutes = distance_m / speed_m_s / 60

    met = met_for_speed(speed_m_s)
    return round_half_up(time_minutes * met * 3.5 * weight_kg / 200)


def calculate_target_calories(tdee_kcal: int, goal: Goal) -> int:
    """Goal-adjusted calorie target; 0 when TDEE is unknown."""
    if tdee_kcal <= 0:
        return 0
    return round_half_up(tdee_kcal * GOAL_MULTIPLIERS[goal])


def calculate_energy(daily: DailyInput) -> EnergyProfile:
    """Calculate BMR, activity burn, TDEE and calorie target for a day.

    Args:
        daily: Normalized daily input

    Returns:
        EnergyProfile with integer kcal values
    """
    bmr = round_half_up(
        calculate_bmr(daily.weight_kg, daily.height_cm, daily.age_years, daily.sex)
    )
    burn = estimate_activity_burn(daily.steps, daily.height_cm, daily.weight_kg)
    tdee = bmr + burn
    target = calculate_target_calories(tdee, daily.goal)

    logger.debug("Energy: bmr=%d burn=%d tdee=%d target=%d", bmr, burn, tdee, target)

    return EnergyProfile(
        bmr_kcal=bmr,
        activity_burn_kcal=burn,
        tdee_kcal=tdee,
        target_calories_kcal=target,
    )
