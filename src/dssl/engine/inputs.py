"""Normalize raw form values into a DailyInput.

Every field degrades to a default instead of raising: unparsable,
non-finite, negative or absurdly large numbers become 0, unknown enums
fall back to the form defaults (male, recomp).
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping

from dssl.engine.models import DailyInput, Goal, Sex

logger = logging.getLogger(__name__)

# Leading decimal number, the way a lenient form parser reads "80kg" as 80
_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_NON_DIGIT = re.compile(r"[^0-9]")

# Anything larger is not a real measurement; it would only overflow
# the downstream products
MAX_INPUT_VALUE = 1e15

DEFAULT_SEX = Sex.MALE
DEFAULT_GOAL = Goal.RECOMP

# Canonical field name -> accepted raw keys (first match wins)
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "height_cm": ("height_cm", "height"),
    "weight_kg": ("weight_kg", "weight"),
    "age_years": ("age_years", "age"),
    "sex": ("sex",),
    "goal": ("goal",),
    "calories_kcal": ("calories_kcal", "calories"),
    "protein_g": ("protein_g", "protein"),
    "carbs_g": ("carbs_g", "carbs"),
    "fat_g": ("fat_g", "fat"),
    "steps": ("steps",),
    "sleep_hours": ("sleep_hours", "sleep"),
    "eating_window_hours": ("eating_window_hours", "eating_window"),
    "workout": ("workout",),
}


def parse_number(raw: Any) -> float:
    """Parse a raw field into a finite, non-negative float (0 on failure)."""
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return 0.0
    else:
        match = _LEADING_NUMBER.match(str(raw))
        if match is None:
            return 0.0
        try:
            value = float(match.group(0))
        except ValueError:
            return 0.0

    if not math.isfinite(value) or value < 0 or value > MAX_INPUT_VALUE:
        logger.debug("Discarding out-of-range numeric input %r", raw)
        return 0.0
    return value


def parse_steps(raw: Any) -> int:
    """Parse a step count by dropping every non-digit character.

    "12,000" -> 12000. An empty result means no steps.
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return 0
    else:
        digits = _NON_DIGIT.sub("", str(raw))
        if not digits:
            return 0
        # float() copes with digit strings int() refuses (over 4300 digits)
        value = float(digits)

    if not math.isfinite(value) or value < 0 or value > MAX_INPUT_VALUE:
        logger.debug("Discarding out-of-range step count %r", raw)
        return 0
    return int(value)


def parse_sex(raw: Any) -> Sex:
    """Parse sex; anything other than "female" is male."""
    if isinstance(raw, Sex):
        return raw
    text = str(raw or "").strip().lower()
    try:
        return Sex(text)
    except ValueError:
        return DEFAULT_SEX


def parse_goal(raw: Any) -> Goal:
    """Parse goal, falling back to recomp."""
    if isinstance(raw, Goal):
        return raw
    text = str(raw or "").strip().lower()
    try:
        return Goal(text)
    except ValueError:
        if text:
            logger.debug("Unknown goal %r, using %s", raw, DEFAULT_GOAL.value)
        return DEFAULT_GOAL


def _lookup(raw: Mapping[str, Any], field_name: str) -> Any:
    for key in FIELD_ALIASES[field_name]:
        if key in raw:
            return raw[key]
    return None


def normalize_input(raw: Mapping[str, Any]) -> DailyInput:
    """Build a DailyInput from a mapping of raw form values.

    Unknown keys are ignored and missing keys take their defaults.

    Args:
        raw: Field name -> raw value (usually strings from a form or CLI)

    Returns:
        DailyInput snapshot
    """
    workout = _lookup(raw, "workout")
    return DailyInput(
        height_cm=parse_number(_lookup(raw, "height_cm")),
        weight_kg=parse_number(_lookup(raw, "weight_kg")),
        age_years=parse_number(_lookup(raw, "age_years")),
        sex=parse_sex(_lookup(raw, "sex")),
        goal=parse_goal(_lookup(raw, "goal")),
        calories_kcal=parse_number(_lookup(raw, "calories_kcal")),
        protein_g=parse_number(_lookup(raw, "protein_g")),
        carbs_g=parse_number(_lookup(raw, "carbs_g")),
        fat_g=parse_number(_lookup(raw, "fat_g")),
        steps=parse_steps(_lookup(raw, "steps")),
        sleep_hours=parse_number(_lookup(raw, "sleep_hours")),
        eating_window_hours=parse_number(_lookup(raw, "eating_window_hours")),
        workout=str(workout) if workout is not None else "",
    )
