"""Per-record validation that drops malformed records instead of failing."""

from loguru import logger
from pydantic import BaseModel, ValidationError
from typing import Any, Iterable, TypeVar


ModelT = TypeVar('ModelT', bound=BaseModel)


def validate_records(
    model: type[ModelT],
    items: Iterable[Any] | None,
    source: str,
) -> tuple[list[ModelT], int]:
    """Validate raw backend records one at a time.

    Args:
        model: Pydantic model to validate each item against
        items: Raw items (dicts) from the backend; None is treated as empty
        source: Name of the data source, used in log lines

    Returns:
        Tuple of (valid records in input order, number of dropped records)
    """
    records: list[ModelT] = []
    dropped = 0

    for index, item in enumerate(items or []):
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            dropped += 1
            logger.warning(
                f'Dropping malformed {source} record at index {index}',
                source=source,
                errors=e.error_count(),
            )

    return records, dropped


def as_list(value: Any) -> list[Any]:
    """Return value if it is a list, else an empty list."""
    return value if isinstance(value, list) else []


def as_dict(value: Any) -> dict[str, Any]:
    """Return value if it is a dict, else an empty dict."""
    return value if isinstance(value, dict) else {}
