"""Output formatters for analysis results."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dssl.engine.models import AnalysisResult
from dssl.export.chart import gauge_fraction, sparkline

GAUGE_WIDTH = 10

SUB_SCORE_LABELS = (
    ("randle", "Randle cycle"),
    ("flexibility", "Metabolic flexibility"),
    ("absorption", "Absorption proxy"),
    ("meal_timing", "Meal timing"),
    ("insulin", "Insulin sensitivity proxy"),
)


def _score_color(score: int) -> str:
    if score >= 7:
        return "green"
    if score >= 4:
        return "yellow"
    return "red"


def _gauge(score: int) -> str:
    filled = round(gauge_fraction(score) * GAUGE_WIDTH)
    return "█" * filled + "░" * (GAUGE_WIDTH - filled)


class TableFormatter:
    """Format results as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(self, result: AnalysisResult) -> None:
        """Print formatted panels and tables to console."""
        scores = result.scores

        header_lines = []
        for label, value in (
            ("Metabolic Health Index", scores.metabolic_health_index),
            ("Recovery", scores.recovery),
            ("Consistency", scores.consistency),
        ):
            color = _score_color(value)
            header_lines.append(
                f"{label:<24} [{color}]{_gauge(value)} {value:>2}/10[/{color}]"
            )
        self.console.print(Panel("\n".join(header_lines), title="Metabolic Scores"))

        # Energy table
        energy = result.energy
        energy_table = Table(title="Energy")
        energy_table.add_column("Metric")
        energy_table.add_column("kcal/day", justify="right")
        energy_table.add_row("BMR", str(energy.bmr_kcal))
        energy_table.add_row("Activity burn (steps)", str(energy.activity_burn_kcal))
        energy_table.add_row("TDEE", str(energy.tdee_kcal))
        energy_table.add_row("Target for goal", str(energy.target_calories_kcal))
        energy_table.add_row("Actual", f"{result.actual_calories_kcal:.0f}")
        self.console.print(energy_table)

        # Sub-scores
        sub_table = Table(title="Sub-scores")
        sub_table.add_column("Score")
        sub_table.add_column("Value", justify="right")
        for attr, label in SUB_SCORE_LABELS:
            value = getattr(scores, attr)
            color = _score_color(value)
            sub_table.add_row(label, f"[{color}]{value}[/{color}]")
        self.console.print(sub_table)

        # Forecast
        forecast = result.forecast
        if len(forecast):
            fc_table = Table(title="7-day Forecast")
            fc_table.add_column("Day")
            fc_table.add_column("Weight (kg)", justify="right")
            fc_table.add_column("Body fat (%)", justify="right")
            for day, weight, body_fat in zip(
                forecast.days, forecast.weight_kg, forecast.body_fat_pct
            ):
                fc_table.add_row(day, f"{weight:.1f}", f"{body_fat:.1f}")
            self.console.print(fc_table)
            self.console.print(f"Weight trend: [cyan]{sparkline(forecast.weight_kg)}[/cyan]")

        if result.notes:
            self.console.print("\n[bold]Key notes[/bold]")
            for note in result.notes:
                self.console.print(f"  • {note}")


class JSONFormatter:
    """Format results as JSON for programmatic use."""

    def format(self, result: AnalysisResult) -> str:
        """Return JSON string (identical for identical input)."""
        return result.to_json(indent=2)


class MarkdownFormatter:
    """Format results as Markdown."""

    def format(self, result: AnalysisResult) -> str:
        """Return Markdown string."""
        scores = result.scores
        energy = result.energy

        lines = [
            "# Daily Metabolic Report",
            "",
            f"**Metabolic Health Index:** {scores.metabolic_health_index}/10",
            f"**Recovery:** {scores.recovery}/10",
            f"**Consistency:** {scores.consistency}/10",
            "",
            "## Energy",
            "",
            "| Metric | kcal/day |",
            "|--------|----------|",
            f"| BMR | {energy.bmr_kcal} |",
            f"| Activity burn | {energy.activity_burn_kcal} |",
            f"| TDEE | {energy.tdee_kcal} |",
            f"| Target | {energy.target_calories_kcal} |",
            f"| Actual | {result.actual_calories_kcal:.0f} |",
            "",
            "## Sub-scores",
            "",
            "| Score | Value |",
            "|-------|-------|",
        ]
        for attr, label in SUB_SCORE_LABELS:
            lines.append(f"| {label} | {getattr(scores, attr)} |")

        forecast = result.forecast
        if len(forecast):
            lines.extend(
                [
                    "",
                    "## 7-day Forecast",
                    "",
                    "| Day | Weight (kg) | Body fat (%) |",
                    "|-----|-------------|--------------|",
                ]
            )
            for day, weight, body_fat in zip(
                forecast.days, forecast.weight_kg, forecast.body_fat_pct
            ):
                lines.append(f"| {day} | {weight:.1f} | {body_fat:.1f} |")

        if result.notes:
            lines.extend(["", "## Notes", ""])
            lines.extend(f"- {note}" for note in result.notes)

        return "\n".join(lines)


OUTPUT_FORMATS = ("table", "json", "markdown")


def format_result(
    result: AnalysisResult,
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format an analysis result in the specified format.

    Args:
        result: Analysis result to format
        output_format: One of 'table', 'json', 'markdown'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        formatter = TableFormatter(console)
        formatter.format(result)
        return None
    elif output_format == "json":
        return JSONFormatter().format(result)
    elif output_format == "markdown":
        return MarkdownFormatter().format(result)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
