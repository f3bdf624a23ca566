"""CLI interface using Typer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dssl.config import get_settings
from dssl.config.settings import Settings, default_config_path
from dssl.export.envelope import (
    analysis_envelope,
    config_envelope,
    error_envelope,
    micronutrient_envelope,
)
from dssl.logging_config import setup_logging

app = typer.Typer(
    help="DSSL: daily metabolic scores and a 7-day weight forecast",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Manage configuration")
app.add_typer(config_app, name="config")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def fail(command: str, message: str, json_output: bool, suggestion: Optional[str] = None) -> None:
    """Report a user error and exit with status 1."""
    if json_output:
        output_json(error_envelope(command, message, suggestion).to_dict())
    else:
        console.print(f"[red]{escape(message)}[/red]")
        if suggestion:
            console.print(suggestion)
    raise typer.Exit(1)


def load_input_file(path: Path) -> dict[str, Any]:
    """Read a YAML or JSON mapping of input fields.

    Raises:
        OSError: If the file cannot be read
        yaml.YAMLError: If the file is not valid YAML/JSON
        ValueError: If the document is not a mapping
    """
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping of field names to values")
    return data


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    try:
        settings = get_settings()
    except (OSError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid config file {default_config_path()}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    setup_logging("DEBUG" if verbose else settings.logging.level)


# ============================================================================
# Analysis Commands
# ============================================================================


@app.command()
def analyze(
    height: Optional[str] = typer.Option(None, "--height", help="Height in cm"),
    weight: Optional[str] = typer.Option(None, "--weight", help="Weight in kg"),
    age: Optional[str] = typer.Option(None, "--age", help="Age in years"),
    sex: Optional[str] = typer.Option(None, "--sex", help="Sex (male/female)"),
    goal: Optional[str] = typer.Option(None, "--goal", help="Goal (cut/bulk/recomp)"),
    calories: Optional[str] = typer.Option(None, "--calories", help="Calories eaten (kcal)"),
    protein: Optional[str] = typer.Option(None, "--protein", help="Protein (g)"),
    carbs: Optional[str] = typer.Option(None, "--carbs", help="Carbohydrates (g)"),
    fat: Optional[str] = typer.Option(None, "--fat", help="Fat (g)"),
    steps: Optional[str] = typer.Option(None, "--steps", help="Step count (e.g. 12,000)"),
    workout: Optional[str] = typer.Option(
        None, "--workout", help="Workout description (e.g. 'intervals', 'lifting')"
    ),
    sleep: Optional[str] = typer.Option(None, "--sleep", help="Sleep (hours)"),
    eating_window: Optional[str] = typer.Option(
        None, "--eating-window", help="Eating window (hours)"
    ),
    from_file: Optional[Path] = typer.Option(
        None, "--from-file", "-f", help="YAML/JSON file with input fields"
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", help="Output format: table, json, markdown"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON envelope"),
) -> None:
    """Score one day of intake and activity, and forecast the next week."""
    from dssl.engine import analyze_raw
    from dssl.export.formatters import OUTPUT_FORMATS, format_result

    settings = get_settings()
    fmt = output_format or settings.defaults.output_format
    if fmt not in OUTPUT_FORMATS:
        fail(
            "analyze",
            f"Unknown output format: {fmt}",
            json_output,
            suggestion=f"Use one of: {', '.join(OUTPUT_FORMATS)}",
        )

    raw: dict[str, Any] = {}
    if from_file is not None:
        try:
            raw.update(load_input_file(from_file))
        except (OSError, yaml.YAMLError, ValueError) as e:
            fail("analyze", f"Could not read input file: {e}", json_output)

    cli_values = {
        "height": height,
        "weight": weight,
        "age": age,
        "sex": sex,
        "goal": goal,
        "calories": calories,
        "protein": protein,
        "carbs": carbs,
        "fat": fat,
        "steps": steps,
        "workout": workout,
        "sleep": sleep,
        "eating_window": eating_window,
    }
    raw.update({k: v for k, v in cli_values.items() if v is not None})
    raw.setdefault("sex", settings.defaults.sex)
    raw.setdefault("goal", settings.defaults.goal)

    result = analyze_raw(raw)

    if json_output:
        output_json(analysis_envelope(result).to_dict())
        return

    output = format_result(result, fmt, console=console)
    if output is not None:
        print(output)


@app.command()
def micros(
    age: Optional[str] = typer.Option(None, "--age", help="Age in years (default 20)"),
    sex: Optional[str] = typer.Option(None, "--sex", help="Sex (male/female)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show daily micronutrient targets for an age and sex."""
    from dssl.data.micronutrients import get_micronutrient_targets

    settings = get_settings()
    targets = get_micronutrient_targets(age, sex or settings.defaults.sex)

    if json_output:
        output_json(micronutrient_envelope(targets).to_dict())
        return

    table = Table(title="Micronutrient Targets")
    table.add_column("Nutrient", style="cyan")
    table.add_column("Target", justify="right")
    table.add_column("Why", style="dim")
    for target in targets:
        table.add_row(target.nutrient, target.target, target.why)
    console.print(table)
    console.print(
        "[dim]Daily baselines by age and sex; not a medical diagnosis.[/dim]"
    )


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the active configuration."""
    settings = get_settings()
    path = default_config_path()

    if json_output:
        output_json(config_envelope(settings, path).to_dict())
        return

    status = "" if path.exists() else " (not found, using defaults)"
    console.print(f"[bold]Config file:[/bold] {path}{status}")
    console.print(yaml.dump(settings.to_dict(), default_flow_style=False, sort_keys=False))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a config file with default values."""
    path = default_config_path()
    if path.exists() and not force:
        console.print(f"[yellow]Config already exists: {path}[/yellow]")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    Settings().save(path)
    console.print(f"[green]Wrote {path}[/green]")


if __name__ == "__main__":
    app()
