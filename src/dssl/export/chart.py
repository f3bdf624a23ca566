"""Chart geometry for the forecast line and score gauges."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

SPARK_CHARS = "▁▂▃▄▅▆▇█"


def _normalize(values: Sequence[float]) -> np.ndarray:
    """Scale values into [0, 1] relative to their min; span floored at 1."""
    arr = np.asarray(values, dtype=float)
    span = float(arr.max() - arr.min()) or 1.0
    return (arr - arr.min()) / span


def forecast_polyline(
    values: Sequence[float],
    width: int = 260,
    height: int = 80,
    padding: int = 10,
) -> list[tuple[float, float]]:
    """Compute SVG polyline points for a forecast series.

    The first value sits at the left edge, the last at the right edge,
    higher values nearer the top.

    Args:
        values: Series to plot (e.g. projected weights)
        width: Drawing width in px
        height: Drawing height in px
        padding: Inset from each edge in px

    Returns:
        (x, y) pairs; empty when there is nothing to plot
    """
    if len(values) == 0:
        return []

    scaled = _normalize(values)
    last_index = (len(values) - 1) or 1
    xs = np.arange(len(values)) / last_index * (width - 2 * padding) + padding
    ys = height - scaled * (height - 2 * padding) - padding
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def polyline_points_attr(points: Sequence[tuple[float, float]]) -> str:
    """Render points as an SVG ``points`` attribute."""
    return " ".join(f"{x:g},{y:g}" for x, y in points)


def sparkline(values: Sequence[float]) -> str:
    """Render a series as a one-line unicode sparkline."""
    if len(values) == 0:
        return ""
    levels = np.rint(_normalize(values) * (len(SPARK_CHARS) - 1)).astype(int)
    return "".join(SPARK_CHARS[level] for level in levels)


def gauge_fraction(score: Optional[int]) -> float:
    """Fraction of a 1-10 score gauge to fill (0 when no score yet)."""
    pct = max(0, min(100, (score or 0) * 10))
    return pct / 100
