"""Run the full scoring pipeline for one day of input."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from dssl.engine.energy import calculate_energy
from dssl.engine.forecast import generate_forecast
from dssl.engine.inputs import normalize_input
from dssl.engine.macros import calculate_macros
from dssl.engine.models import AnalysisResult, DailyInput
from dssl.engine.notes import generate_notes
from dssl.engine.scores import calculate_scores

logger = logging.getLogger(__name__)


def analyze(daily: DailyInput) -> AnalysisResult:
    """Score a day and project the next week.

    Pure function of its input: nothing is cached between calls and every
    field of the result is always populated.

    Args:
        daily: Normalized daily input

    Returns:
        AnalysisResult with energy, macros, scores, forecast and notes
    """
    energy = calculate_energy(daily)
    macros = calculate_macros(daily.protein_g, daily.carbs_g, daily.fat_g)
    scores = calculate_scores(daily, energy, macros)
    forecast = generate_forecast(daily, energy)
    notes = generate_notes(daily, energy)

    logger.debug(
        "Analysis: mhi=%d recovery=%d consistency=%d notes=%d",
        scores.metabolic_health_index,
        scores.recovery,
        scores.consistency,
        len(notes),
    )

    return AnalysisResult(
        energy=energy,
        actual_calories_kcal=daily.calories_kcal,
        macros=macros,
        scores=scores,
        forecast=forecast,
        notes=tuple(notes),
    )


def analyze_raw(raw: Mapping[str, Any]) -> AnalysisResult:
    """Normalize raw form values and analyze them."""
    return analyze(normalize_input(raw))
