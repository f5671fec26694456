"""Alert severity histogram, per-day series and recent alerts."""

from campus_noc.models import (
    AlertEvent,
    AlertSeverity,
    AlertView,
    DailyAlertCount,
    Device,
    RecentAlert,
)
from campus_noc.models.device import device_label
from campus_noc.utils.numeric import non_negative_int
from campus_noc.utils.validation import as_dict, as_list, validate_records
from datetime import timezone
from typing import Any, Sequence


RECENT_ALERT_LIMIT = 6


def severity_histogram(alerts: Sequence[AlertEvent]) -> dict[str, int]:
    """Count alerts per known severity; unknown severities are ignored."""
    histogram = {severity.value: 0 for severity in AlertSeverity}
    for alert in alerts:
        severity = alert.severity.lower()
        if severity in histogram:
            histogram[severity] += 1
    return histogram


def alerts_per_day(alerts: Sequence[AlertEvent]) -> list[DailyAlertCount]:
    """Count alerts per UTC calendar day of opening, ascending by date.

    Alerts without a parseable opening time are left out.
    """
    per_day: dict[str, int] = {}
    for alert in alerts:
        if alert.opened_at is None:
            continue
        day = alert.opened_at.astimezone(timezone.utc).date().isoformat()
        per_day[day] = per_day.get(day, 0) + 1

    return [DailyAlertCount(day=day, count=count) for day, count in sorted(per_day.items())]


def recent_alerts(
    alerts: Sequence[AlertEvent],
    device_index: dict[str, Device] | None = None,
    limit: int = RECENT_ALERT_LIMIT,
) -> list[RecentAlert]:
    """First alerts in the order the alert source delivered them.

    The source is expected to deliver newest first; no re-sorting happens here.
    """
    device_index = device_index or {}
    return [
        RecentAlert(
            id=alert.id,
            device_id=alert.device_id,
            device_name=device_label(alert.device_id, device_index),
            severity=alert.severity,
            type=alert.type,
            opened_at=alert.opened_at,
            status=alert.status,
        )
        for alert in alerts[:limit]
    ]


def bucketize_alerts(
    alerts: Sequence[AlertEvent],
    device_index: dict[str, Device] | None = None,
    counts: dict[str, Any] | None = None,
) -> AlertView:
    """Build the alerts panel view.

    Args:
        alerts: Alert events scoped to the recency window, newest first
        device_index: Device identity lookup for display names
        counts: Pre-computed total / open / closed counts

    Returns:
        AlertView with histogram, per-day series and recent alerts
    """
    counts = counts or {}
    return AlertView(
        total=non_negative_int(counts.get('total'), len(alerts)),
        open=non_negative_int(counts.get('open')),
        closed=non_negative_int(counts.get('closed')),
        severity_histogram=severity_histogram(alerts),
        per_day=alerts_per_day(alerts),
        recent=recent_alerts(alerts, device_index),
    )


def bucketize_alerts_payload(
    payload: Any,
    device_index: dict[str, Device] | None = None,
) -> tuple[AlertView, int]:
    """Build the alerts view from the backend's alert summary payload.

    Returns:
        Tuple of (AlertView, number of malformed alert records dropped)
    """
    payload = as_dict(payload)
    alerts, dropped = validate_records(AlertEvent, as_list(payload.get('recent')), 'alerts')
    return bucketize_alerts(alerts, device_index, counts=payload), dropped
