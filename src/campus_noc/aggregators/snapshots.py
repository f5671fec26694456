"""Before/after configuration snapshot resolution."""

from campus_noc.models import ConfigDiff, ConfigSnapshot, InsufficientHistory, SnapshotPair
from campus_noc.utils.validation import as_dict, as_list, validate_records
from loguru import logger
from typing import Any, Sequence


def resolve_config_diff(
    device_id: str,
    snapshots: Sequence[ConfigSnapshot],
    dropped: int = 0,
) -> ConfigDiff:
    """Pick the two most recent backups of a device as a before/after pair.

    ``after`` is the newest snapshot and ``before`` the newest one taken
    strictly earlier. Snapshots without a timestamp cannot be ordered and are
    skipped. The history itself is never modified.

    Args:
        device_id: Device the history belongs to
        snapshots: Full snapshot history, in any order
        dropped: Records already rejected while parsing the history, carried
            on the result for diagnostics

    Returns:
        SnapshotPair, or InsufficientHistory when no such pair exists
    """
    usable = sorted(
        (snapshot for snapshot in snapshots if snapshot.timestamp is not None),
        key=lambda snapshot: snapshot.timestamp,
    )

    if len(usable) >= 2:
        after = usable[-1]
        for before in reversed(usable[:-1]):
            if before.timestamp < after.timestamp:
                return SnapshotPair(
                    device_id=device_id, before=before, after=after, dropped=dropped
                )

    return InsufficientHistory(device_id=device_id, available=len(usable), dropped=dropped)


def parse_snapshot_history(payload: Any) -> tuple[list[ConfigSnapshot], int]:
    """Extract snapshot records from the backup store's response.

    Accepts a bare list, ``{"snapshots": [...]}``, or the legacy
    ``{"before": {...}, "after": {...}}`` shape.

    Returns:
        Tuple of (snapshots, number of malformed records dropped)
    """
    if isinstance(payload, list):
        raw = payload
    else:
        payload = as_dict(payload)
        if 'snapshots' in payload:
            raw = as_list(payload.get('snapshots'))
        else:
            raw = [payload[key] for key in ('before', 'after') if payload.get(key)]

    snapshots, dropped = validate_records(ConfigSnapshot, raw, 'snapshots')

    undated = sum(1 for snapshot in snapshots if snapshot.timestamp is None)
    if undated:
        logger.warning('Ignoring snapshots without a timestamp', count=undated)

    return snapshots, dropped + undated
