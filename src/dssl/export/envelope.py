"""JSON envelopes for ``--json`` CLI output.

Every command answers with the same top-level shape so scripts can check
``success`` before reading ``data``. Builders take domain objects, not
pre-built dicts, and produce the one-line summary from them. Envelopes
carry no timestamp: the same input gives the same bytes.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from dssl.config.settings import Settings
    from dssl.data.micronutrients import MicronutrientTarget
    from dssl.engine.models import AnalysisResult

SCHEMA_VERSION = "1.0"


@dataclass(frozen=True)
class CommandEnvelope:
    """Result of one CLI command, success or failure."""

    success: bool
    command: str
    data: dict[str, Any] = field(default_factory=dict)
    errors: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()
    summary: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "command": self.command,
            "data": self.data,
            "errors": list(self.errors),
            "suggestions": list(self.suggestions),
            "human_summary": self.summary,
            "schema_version": SCHEMA_VERSION,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def summarize_analysis(result: AnalysisResult) -> str:
    """One line for humans: index, calorie target, forecast end, note count."""
    parts = [f"Metabolic Health Index {result.scores.metabolic_health_index}/10"]

    target = result.energy.target_calories_kcal
    parts.append(f"target {target} kcal" if target > 0 else "no calorie target")

    weights = result.forecast.weight_kg
    if weights and weights[-1] > 0:
        parts.append(f"day 7 weight {weights[-1]:.1f} kg")

    count = len(result.notes)
    parts.append(f"{count} note{'' if count == 1 else 's'}")
    return ", ".join(parts)


def analysis_envelope(result: AnalysisResult) -> CommandEnvelope:
    """Wrap one day's analysis."""
    return CommandEnvelope(
        success=True,
        command="analyze",
        data=result.to_dict(),
        summary=summarize_analysis(result),
    )


def micronutrient_envelope(targets: Sequence[MicronutrientTarget]) -> CommandEnvelope:
    """Wrap a micronutrient target list."""
    return CommandEnvelope(
        success=True,
        command="micros",
        data={"targets": [t.to_dict() for t in targets]},
        summary=f"{len(targets)} micronutrient targets",
    )


def config_envelope(settings: Settings, path: Path) -> CommandEnvelope:
    """Wrap the active settings and where they were loaded from."""
    exists = path.exists()
    return CommandEnvelope(
        success=True,
        command="config show",
        data={"path": str(path), "exists": exists, **settings.to_dict()},
        summary=f"Config from {path}" if exists else "Default config (no file)",
    )


def error_envelope(
    command: str,
    error: str,
    suggestion: Optional[str] = None,
) -> CommandEnvelope:
    """Wrap a user error.

    Args:
        command: The command that failed
        error: Error message
        suggestion: How to fix it, if known

    Returns:
        CommandEnvelope with success=False
    """
    return CommandEnvelope(
        success=False,
        command=command,
        errors=(error,),
        suggestions=(suggestion,) if suggestion else (),
        summary=f"Error: {error}",
    )
