"""Longest / shortest uptime selection."""

from campus_noc.models import Device, UptimeExtrema
from typing import Sequence


def _uptime(device: Device) -> float:
    return device.uptime_hours or 0


def select_uptime_extrema(devices: Sequence[Device]) -> UptimeExtrema:
    """Find the devices with the longest and shortest uptime.

    Ties go to the first device in input order for both ends.
    """
    if not devices:
        return UptimeExtrema()

    longest = shortest = devices[0]
    for device in devices[1:]:
        if _uptime(device) > _uptime(longest):
            longest = device
        if _uptime(device) < _uptime(shortest):
            shortest = device

    return UptimeExtrema(longest=longest, shortest=shortest)


def format_uptime(hours: float | None) -> str:
    """Render uptime hours as whole days plus remaining hours, e.g. '3d 5h'."""
    hours = hours or 0
    days = int(hours // 24)
    remainder = hours % 24
    return f'{days}d {remainder:g}h'
