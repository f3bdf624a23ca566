"""Data models for the metabolic scoring pipeline."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Sex(Enum):
    """Biological sex for BMR and body-fat baseline."""
    MALE = "male"
    FEMALE = "female"


class Goal(Enum):
    """Body composition goal."""
    CUT = "cut"            # 20% deficit
    BULK = "bulk"          # 12% surplus
    RECOMP = "recomp"      # mild 6% deficit


@dataclass(frozen=True)
class DailyInput:
    """One day of self-reported metrics.

    Zero means "not provided" for every numeric field.
    """

    height_cm: float = 0.0
    weight_kg: float = 0.0
    age_years: float = 0.0
    sex: Sex = Sex.MALE
    goal: Goal = Goal.RECOMP
    calories_kcal: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    steps: int = 0
    sleep_hours: float = 0.0
    eating_window_hours: float = 0.0
    workout: str = ""  # optional free-text workout descriptor


@dataclass(frozen=True)
class EnergyProfile:
    """Energy expenditure estimates (kcal/day)."""

    bmr_kcal: int
    activity_burn_kcal: int
    tdee_kcal: int
    target_calories_kcal: int


@dataclass(frozen=True)
class MacroProfile:
    """Calorie contributions and shares of each macronutrient."""

    protein_kcal: float
    carbs_kcal: float
    fat_kcal: float
    protein_share: float
    carbs_share: float
    fat_share: float

    @property
    def total_kcal(self) -> float:
        """Unfloored sum of the three contributions."""
        return self.protein_kcal + self.carbs_kcal + self.fat_kcal


@dataclass(frozen=True)
class ScoreSet:
    """Sub-scores, composite index and auxiliary scores, each in [1, 10]."""

    randle: int
    flexibility: int
    absorption: int
    meal_timing: int
    insulin: int
    metabolic_health_index: int
    recovery: int
    consistency: int

    @property
    def sub_scores(self) -> tuple[int, int, int, int, int]:
        return (
            self.randle,
            self.flexibility,
            self.absorption,
            self.meal_timing,
            self.insulin,
        )


@dataclass(frozen=True)
class Forecast:
    """Seven-day straight-line weight and body-fat projection.

    Illustrative only: a linear extrapolation, not a physiological model.
    """

    days: tuple[str, ...] = ()
    weight_kg: tuple[float, ...] = ()
    body_fat_pct: tuple[float, ...] = ()

    @classmethod
    def empty(cls) -> "Forecast":
        """Forecast state before any analysis has run."""
        return cls()

    def __len__(self) -> int:
        return len(self.days)


@dataclass(frozen=True)
class AnalysisResult:
    """Complete output record of one analysis call."""

    energy: EnergyProfile
    actual_calories_kcal: float
    macros: MacroProfile
    scores: ScoreSet
    forecast: Forecast
    notes: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the debug-view dictionary."""
        return {
            "metabolic_health_index": self.scores.metabolic_health_index,
            "sub_scores": {
                "randle_cycle": self.scores.randle,
                "metabolic_flexibility": self.scores.flexibility,
                "micronutrient_absorption_proxy": self.scores.absorption,
                "meal_timing": self.scores.meal_timing,
                "insulin_sensitivity_proxy": self.scores.insulin,
            },
            "recovery_score": self.scores.recovery,
            "consistency_score": self.scores.consistency,
            "energy": {
                "bmr": self.energy.bmr_kcal,
                "activity_burn_estimate": self.energy.activity_burn_kcal,
                "tdee_estimate": self.energy.tdee_kcal,
                "recommended_calories_for_goal": self.energy.target_calories_kcal,
                "actual_calories": self.actual_calories_kcal,
            },
            "macros": {
                "protein_kcal": self.macros.protein_kcal,
                "carbs_kcal": self.macros.carbs_kcal,
                "fat_kcal": self.macros.fat_kcal,
                "protein_share": self.macros.protein_share,
                "carbs_share": self.macros.carbs_share,
                "fat_share": self.macros.fat_share,
            },
            "forecast": {
                "days": list(self.forecast.days),
                "weight_kg": list(self.forecast.weight_kg),
                "body_fat_percent": list(self.forecast.body_fat_pct),
            },
            "notes": list(self.notes),
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
