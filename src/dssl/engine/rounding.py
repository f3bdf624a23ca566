"""Rounding helpers shared by the engine."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

SCORE_MIN = 1
SCORE_MAX = 10

_ONE_DECIMAL = Decimal("0.1")
# Enough digits to quantize any finite float without InvalidOperation
_WIDE_CONTEXT = Context(prec=400)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    Non-finite values (an overflowed product) round to 0.

    Python's round() uses banker's rounding; the calculator's published
    numbers (e.g. 23.5 -> 24) were produced with half-up rounding.
    """
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = SCORE_MIN, high: int = SCORE_MAX) -> int:
    """Round a raw score and clamp it into [low, high]."""
    return max(low, min(high, round_half_up(value)))


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, ties away from zero.

    Works on the exact binary value of the float, so 80.25 -> 80.3 while
    1.15 (stored as 1.1499...) -> 1.1. Non-finite values become 0.0.
    """
    if not math.isfinite(value):
        return 0.0
    rounded = Decimal(value).quantize(
        _ONE_DECIMAL, rounding=ROUND_HALF_UP, context=_WIDE_CONTEXT
    )
    # + 0.0 turns -0.0 into 0.0
    return float(rounded) + 0.0
