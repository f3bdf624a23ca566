"""Plain-language observations about the day.

Rules run in a fixed order and each appends at most one note.
"""

from __future__ import annotations

from dssl.engine.models import DailyInput, EnergyProfile
from dssl.engine.scores import HIGH_STEPS, LOW_STEPS, protein_target_g

NOTE_CALORIES_ON_TARGET = "You were very close to your calorie target today."
NOTE_CALORIES_OVER = (
    "You ate above your target; repeated days like this lead to slow weight gain."
)
NOTE_CALORIES_UNDER = (
    "You ate below your target; useful for cutting, but monitor recovery and energy."
)
NOTE_PROTEIN_SWEET_SPOT = "Protein intake is right in the sweet spot for muscle."
NOTE_PROTEIN_LOW = "Protein seems low for optimal recovery and muscle gain."
NOTE_STEPS_HIGH = "Great movement today - step count supports insulin health."
NOTE_STEPS_LOW = "Very low movement today; even short walks would help a lot."
NOTE_SHORT_SLEEP = "Short sleep weakens recovery and carb handling. Aim for 7-9h."
NOTE_LONG_WINDOW = "Your eating window is very long; try compressing it slightly."


def generate_notes(daily: DailyInput, energy: EnergyProfile) -> list[str]:
    """Build the ordered list of notes for a day.

    Args:
        daily: Normalized daily input
        energy: Energy profile for the same day

    Returns:
        Notes in rule order (calories, protein, steps, sleep, eating window)
    """
    notes: list[str] = []
    calories = daily.calories_kcal
    target = energy.target_calories_kcal

    if calories and target:
        if abs(calories - target) / target < 0.1:
            notes.append(NOTE_CALORIES_ON_TARGET)
        elif calories > target:
            notes.append(NOTE_CALORIES_OVER)
        else:
            notes.append(NOTE_CALORIES_UNDER)

    protein_target = protein_target_g(daily.weight_kg)
    protein = daily.protein_g
    if protein_target and protein:
        if protein_target * 0.9 <= protein <= protein_target * 1.1:
            notes.append(NOTE_PROTEIN_SWEET_SPOT)
        elif protein < protein_target * 0.7:
            notes.append(NOTE_PROTEIN_LOW)

    if daily.steps > HIGH_STEPS:
        notes.append(NOTE_STEPS_HIGH)
    elif daily.steps < LOW_STEPS:
        notes.append(NOTE_STEPS_LOW)

    if daily.sleep_hours < 6:
        notes.append(NOTE_SHORT_SLEEP)

    if daily.eating_window_hours > 15:
        notes.append(NOTE_LONG_WINDOW)

    return notes
