"""Tests for result formatters."""

from __future__ import annotations

import json

import pytest
from rich.console import Console

from dssl.engine import analyze
from dssl.export.formatters import (
    JSONFormatter,
    MarkdownFormatter,
    TableFormatter,
    format_result,
)


@pytest.fixture
def result(scenario_input):
    return analyze(scenario_input)


class TestFormatters:
    """Tests for the three output formats."""

    def test_table(self, result) -> None:
        console = Console(record=True, width=120)
        TableFormatter(console).format(result)
        text = console.export_text()
        assert "Metabolic Health Index" in text
        assert "Day 7" in text
        assert "1853" in text
        assert "Key notes" in text

    def test_json(self, result) -> None:
        output = JSONFormatter().format(result)
        assert json.loads(output) == result.to_dict()

    def test_markdown(self, result) -> None:
        output = MarkdownFormatter().format(result)
        assert output.startswith("# Daily Metabolic Report")
        assert "| Day 1 | 80.0 |" in output
        assert "| Meal timing | 9 |" in output

    def test_format_result_dispatch(self, result) -> None:
        assert format_result(result, "json") == JSONFormatter().format(result)
        assert format_result(result, "table", console=Console(record=True)) is None

    def test_unknown_format(self, result) -> None:
        with pytest.raises(ValueError, match="Unknown output format"):
            format_result(result, "xml")
