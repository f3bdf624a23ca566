"""Metabolic scoring engine.

Pipeline: normalize raw input -> energy estimates -> macro shares ->
scores -> 7-day forecast and notes, all collected in one AnalysisResult.
"""

from __future__ import annotations

from dssl.engine.analyze import analyze, analyze_raw
from dssl.engine.inputs import normalize_input
from dssl.engine.models import (
    AnalysisResult,
    DailyInput,
    EnergyProfile,
    Forecast,
    Goal,
    MacroProfile,
    ScoreSet,
    Sex,
)

__all__ = [
    "AnalysisResult",
    "DailyInput",
    "EnergyProfile",
    "Forecast",
    "Goal",
    "MacroProfile",
    "ScoreSet",
    "Sex",
    "analyze",
    "analyze_raw",
    "normalize_input",
]
