"""Lenient field types shared by the record models.

Backend records are produced by several external collaborators and are only
loosely typed. These annotated types make sure a bad metric or timestamp
degrades to None instead of failing the whole record.
"""

from campus_noc.utils.numeric import coerce_percent, is_real_number
from datetime import date, datetime, timezone
from pydantic import BeforeValidator, StringConstraints
from typing import Annotated, Any


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None when it cannot be parsed.

    Naive timestamps are interpreted as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_day(value: Any) -> date | None:
    """Parse a day-granularity date ('2024-05-01' or a full timestamp)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            parsed = parse_timestamp(value)
            return parsed.date() if parsed else None
    return None


def _non_negative(value: Any) -> float | None:
    if not is_real_number(value) or value < 0:
        return None
    return value


def _text(value: Any) -> str:
    if value is None:
        return ''
    return str(value).strip()


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(item) for item in value if item is not None]


Timestamp = Annotated[datetime | None, BeforeValidator(parse_timestamp)]
Percent = Annotated[float | None, BeforeValidator(coerce_percent)]
NonNegative = Annotated[float | None, BeforeValidator(_non_negative)]
Label = Annotated[str, BeforeValidator(_text)]
Identifier = Annotated[str, StringConstraints(min_length=1), BeforeValidator(_text)]
StringList = Annotated[list[str], BeforeValidator(_string_list)]
Day = Annotated[date, BeforeValidator(parse_day)]
Metric = Annotated[float, BeforeValidator(coerce_percent)]
