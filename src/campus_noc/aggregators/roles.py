"""Device health grouped by network role."""

from campus_noc.models import Device, DeviceRole, RoleBreakdown, RoleStats
from campus_noc.utils.numeric import metric_or_zero, round_half_up
from typing import Sequence


ROLE_LABELS = {
    DeviceRole.ROUTER: 'Routers',
    DeviceRole.DISTRIBUTION_SWITCH: 'Distribution',
    DeviceRole.ACCESS_SWITCH: 'Access',
}


def aggregate_roles(devices: Sequence[Device]) -> RoleBreakdown:
    """Bucket devices by role and average their CPU, memory and health.

    Missing or out-of-range metrics count as zero. Roles with no devices
    report None for every average. Devices outside the three known roles
    are ignored.

    Args:
        devices: Device inventory in backend order

    Returns:
        RoleBreakdown with one RoleStats per known role
    """
    totals = {role: {'count': 0, 'cpu': 0.0, 'mem': 0.0, 'health': 0.0} for role in DeviceRole}
    ignored = 0

    for device in devices:
        role = device.known_role
        if role is None:
            ignored += 1
            continue

        bucket = totals[role]
        bucket['count'] += 1
        bucket['cpu'] += metric_or_zero(device.cpu_usage)
        bucket['mem'] += metric_or_zero(device.memory_usage)
        bucket['health'] += metric_or_zero(device.health_score)

    roles = []
    for role in DeviceRole:
        bucket = totals[role]
        count = int(bucket['count'])
        if count:
            roles.append(
                RoleStats(
                    role=role,
                    label=ROLE_LABELS[role],
                    count=count,
                    avg_cpu=round_half_up(bucket['cpu'] / count),
                    avg_memory=round_half_up(bucket['mem'] / count),
                    avg_health=round_half_up(bucket['health'] / count),
                )
            )
        else:
            roles.append(RoleStats(role=role, label=ROLE_LABELS[role]))

    return RoleBreakdown(roles=roles, ignored=ignored)


def count_roles(devices: Sequence[Device]) -> dict[str, int]:
    """Count devices per known role (zero for empty roles)."""
    counts = {role.value: 0 for role in DeviceRole}
    for device in devices:
        role = device.known_role
        if role is not None:
            counts[role.value] += 1
    return counts
