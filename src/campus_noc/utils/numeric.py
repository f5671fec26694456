"""Numeric helpers shared by the aggregators."""

import math
from typing import Any


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, unlike round())."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def is_real_number(value: Any) -> bool:
    """Check value is a finite int/float (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def coerce_percent(value: Any) -> float | None:
    """Return value if it is a real number in [0, 100], else None."""
    if not is_real_number(value) or not 0 <= value <= 100:
        return None
    return value


def metric_or_zero(value: Any) -> float:
    """Treat missing or out-of-range percent metrics as zero."""
    percent = coerce_percent(value)
    return 0 if percent is None else percent


def percent_of(part: int, total: int) -> int:
    """Whole percent of part/total, 0 when total is zero."""
    if total <= 0:
        return 0
    return round_half_up(part / total * 100)


def non_negative_int(value: Any, default: int | None = 0) -> int | None:
    """Return value if it is a non-negative whole number (bools excluded), else default.

    Whole-number floats such as 40.0 are accepted and returned as int.
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return default
    return value
