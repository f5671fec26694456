"""Shared utilities for the dashboard aggregation layer."""

# Import only basic utilities to avoid circular dependencies with campus_noc.models
from campus_noc.utils.errors import DashboardError, ErrorCodes, TransportFailure
from campus_noc.utils.logging import configure_logging, get_logger

__all__ = [
    'DashboardError',
    'ErrorCodes',
    'TransportFailure',
    'configure_logging',
    'get_logger',
]
