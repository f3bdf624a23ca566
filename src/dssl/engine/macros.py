"""Macronutrient calorie contributions and shares."""

from __future__ import annotations

from dssl.engine.models import MacroProfile

KCAL_PER_GRAM = {
    "protein": 4,
    "carbs": 4,
    "fat": 9,
}


def calculate_macros(protein_g: float, carbs_g: float, fat_g: float) -> MacroProfile:
    """Convert macro grams into kcal contributions and normalized shares.

    The share denominator is floored at 1 kcal so an empty log yields
    all-zero shares instead of dividing by zero.
    """
    protein_kcal = protein_g * KCAL_PER_GRAM["protein"]
    carbs_kcal = carbs_g * KCAL_PER_GRAM["carbs"]
    fat_kcal = fat_g * KCAL_PER_GRAM["fat"]

    total = protein_kcal + carbs_kcal + fat_kcal or 1

    return MacroProfile(
        protein_kcal=protein_kcal,
        carbs_kcal=carbs_kcal,
        fat_kcal=fat_kcal,
        protein_share=protein_kcal / total,
        carbs_share=carbs_kcal / total,
        fat_share=fat_kcal / total,
    )
