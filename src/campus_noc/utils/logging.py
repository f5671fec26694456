"""Loguru setup for refresh tracing.

Every refresh binds one correlation id so the six concurrent fetches of a
batch, the aggregation pass and the follow-up config diff can be grouped in
the JSON log.
"""

import os
import sys
from loguru import logger
from pathlib import Path
from typing import Any


DEFAULT_LOG_FILE = Path.home() / '.campus-noc' / 'logs' / 'campus_noc.log'

FILE_FORMAT = '{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[correlation_id]} | {message}'
CONSOLE_FORMAT = (
    '<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | '
    '<cyan>{extra[correlation_id]}</cyan> <cyan>{name}</cyan> - <level>{message}</level>'
)


def configure_logging(
    log_file: str | None = None,
    log_level: str = 'INFO',
    include_console: bool = False,
) -> None:
    """Install the JSON file sink and, optionally, a console sink.

    Args:
        log_file: Path to log file (defaults to ~/.campus-noc/logs/campus_noc.log)
        log_level: Minimum level for both sinks
        include_console: Also log to stderr (implied by CAMPUS_NOC_DEBUG)
    """
    logger.remove()
    logger.configure(extra={'correlation_id': ''})

    if log_file:
        path = Path(log_file)
    else:
        path = DEFAULT_LOG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        path,
        format=FILE_FORMAT,
        serialize=True,
        rotation='10 MB',
        retention='7 days',
        compression='gz',
        level=log_level,
        backtrace=True,
        diagnose=False,
    )

    if include_console or os.getenv('CAMPUS_NOC_DEBUG'):
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=log_level, colorize=True)


def get_logger(correlation_id: str = '') -> Any:
    """Return the loguru logger bound to a refresh correlation id."""
    return logger.bind(correlation_id=correlation_id)


def log_fetch_call(source: str, params: dict[str, Any], correlation_id: str = '') -> None:
    """Log a backend fetch being issued.

    Args:
        source: Name of the fetch (devices, alerts, ...)
        params: Fetch parameters
        correlation_id: Refresh correlation ID
    """
    get_logger(correlation_id).debug('Fetch started', source=source, params=params)


def log_fetch_result(
    source: str,
    success: bool,
    result: Any = None,
    error: str | None = None,
    correlation_id: str = '',
) -> None:
    """Log a backend fetch outcome.

    Only the payload shape is logged: its type and, for lists and objects,
    the number of entries.
    """
    log = get_logger(correlation_id)
    if not success:
        log.error('Fetch failed', source=source, error=error)
        return

    size = len(result) if isinstance(result, (list, dict)) else None
    log.debug('Fetch completed', source=source, result_type=type(result).__name__, size=size)
