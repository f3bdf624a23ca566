"""Daily micronutrient targets by sex and age bracket.

Values are rounded RDA/AI figures. This is a static reference table used
for display; it plays no part in scoring.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from dssl.engine.inputs import parse_number, parse_sex
from dssl.engine.models import Sex

DEFAULT_AGE = 20

# (upper bound exclusive, bracket name); anything older is "senior"
AGE_BRACKETS = (
    (9, "child"),
    (14, "young_teen"),
    (19, "teen"),
    (31, "young_adult"),
    (51, "adult"),
)
SENIOR = "senior"

BRACKET_ORDER = ("child", "young_teen", "teen", "young_adult", "adult", SENIOR)


@dataclass(frozen=True)
class NutrientReference:
    """One nutrient row of the reference table."""

    nutrient: str
    unit: str
    male: tuple[int, int, int, int, int, int]  # in BRACKET_ORDER
    female: tuple[int, int, int, int, int, int]
    why: str

    def value_for(self, sex: Sex, bracket: str) -> int:
        values = self.female if sex == Sex.FEMALE else self.male
        return values[BRACKET_ORDER.index(bracket)]


@dataclass(frozen=True)
class MicronutrientTarget:
    """A personalized row for display."""

    nutrient: str
    target: str
    why: str

    def to_dict(self) -> dict[str, str]:
        return {"nutrient": self.nutrient, "target": self.target, "why": self.why}


MICRONUTRIENTS: tuple[NutrientReference, ...] = (
    NutrientReference(
        nutrient="Vitamin D",
        unit="IU/day",
        male=(600, 600, 600, 600, 600, 800),
        female=(600, 600, 600, 600, 600, 800),
        why="Supports bones, hormones, and immune system.",
    ),
    NutrientReference(
        nutrient="Calcium",
        unit="mg/day",
        male=(1000, 1300, 1300, 1000, 1000, 1200),
        female=(1000, 1300, 1300, 1000, 1000, 1200),
        why="Key for bones, teeth, and muscle contraction.",
    ),
    NutrientReference(
        nutrient="Magnesium",
        unit="mg/day",
        male=(240, 410, 410, 400, 400, 420),
        female=(240, 360, 360, 310, 310, 320),
        why="Helps muscle function, sleep quality, and energy.",
    ),
    NutrientReference(
        nutrient="Zinc",
        unit="mg/day",
        male=(8, 11, 11, 11, 11, 11),
        female=(8, 9, 9, 8, 8, 8),
        why="Supports hormones, immune health, and recovery.",
    ),
    NutrientReference(
        nutrient="Iron",
        unit="mg/day",
        male=(8, 11, 11, 8, 8, 8),
        female=(8, 15, 15, 18, 18, 8),
        why="Needed for oxygen delivery and avoiding fatigue.",
    ),
    NutrientReference(
        nutrient="Potassium",
        unit="mg/day",
        male=(2300, 2500, 3000, 3400, 3400, 3400),
        female=(2300, 2300, 2600, 2600, 2600, 2600),
        why="Supports blood pressure, nerve function, and muscle.",
    ),
    NutrientReference(
        nutrient="Omega-3 (EPA+DHA)",
        unit="mg/day",
        male=(250, 250, 250, 250, 250, 250),
        female=(250, 250, 250, 250, 250, 250),
        why="Brain health, inflammation control, and heart health.",
    ),
    NutrientReference(
        nutrient="Fiber",
        unit="g/day",
        male=(25, 30, 30, 30, 30, 28),
        female=(22, 25, 25, 25, 25, 22),
        why="Gut health, stable blood sugar, and fullness.",
    ),
)


def age_bracket(age_years: float) -> str:
    """Map an age in years to its bracket name."""
    for upper, name in AGE_BRACKETS:
        if age_years < upper:
            return name
    return SENIOR


def get_micronutrient_targets(
    age: Any = None,
    sex: Optional[Any] = None,
) -> list[MicronutrientTarget]:
    """Look up daily micronutrient targets.

    Args:
        age: Age in years (raw values accepted; missing or 0 means 20)
        sex: "female" selects the female column, anything else male

    Returns:
        One MicronutrientTarget per nutrient, in table order
    """
    age_years = parse_number(age) or DEFAULT_AGE
    sex_enum = parse_sex(sex)
    bracket = age_bracket(age_years)

    return [
        MicronutrientTarget(
            nutrient=ref.nutrient,
            target=f"{ref.value_for(sex_enum, bracket)} {ref.unit}",
            why=ref.why,
        )
        for ref in MICRONUTRIENTS
    ]
