"""Analytics aggregation layer for the campus LAN operations dashboard."""

__version__ = '0.1.0'
