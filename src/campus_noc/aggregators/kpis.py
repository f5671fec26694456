"""Header KPIs."""

from campus_noc.aggregators.roles import count_roles
from campus_noc.models import AlertView, AutomationView, Device, KpiSummary
from campus_noc.utils.numeric import metric_or_zero, round_half_up
from typing import Sequence


def build_kpis(
    devices: Sequence[Device],
    automation: AutomationView,
    alerts: AlertView,
) -> KpiSummary:
    """Compute the dashboard header figures."""
    avg_health = 0
    if devices:
        total_health = sum(metric_or_zero(device.health_score) for device in devices)
        avg_health = round_half_up(total_health / len(devices))

    return KpiSummary(
        total_devices=len(devices),
        role_counts=count_roles(devices),
        avg_health=avg_health,
        automation_success_rate=automation.success_rate,
        open_alerts=alerts.open,
    )
