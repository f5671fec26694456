"""Trend series validation."""

from campus_noc.models import TrendPoint, TrendSeries
from campus_noc.utils.errors import DashboardError, ErrorCodes
from campus_noc.utils.validation import as_dict, as_list, validate_records
from typing import Any, Iterable


SUPPORTED_RANGES = (7, 30)


def assemble_trends(range_days: int, points: Iterable[Any] | None) -> TrendSeries:
    """Validate a backend trend series for the selected range.

    Points need a parseable date and both metrics as numbers in [0, 100].
    Invalid points are dropped and counted; the rest keep their order.

    Raises:
        DashboardError: INVALID_RANGE if range_days is not 7 or 30
    """
    if range_days not in SUPPORTED_RANGES:
        raise DashboardError(
            message=f'Unsupported trend range: {range_days} days',
            error_code=ErrorCodes.INVALID_RANGE,
            suggestion='Use a 7 or 30 day range',
        )

    valid, dropped = validate_records(TrendPoint, points, 'trends')
    return TrendSeries(range_days=range_days, points=valid, dropped=dropped)


def trend_points(payload: Any) -> list[Any]:
    """Unwrap the point list from a ``{"data": [...]}`` payload or a bare list."""
    if isinstance(payload, list):
        return payload
    return as_list(as_dict(payload).get('data'))
