"""Display-ready view models produced by the aggregators."""

from campus_noc.models.compliance import ComplianceRule
from campus_noc.models.device import Device, DeviceRole
from campus_noc.models.snapshot import ConfigSnapshot
from campus_noc.models.trend import TrendPoint
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Literal


class ViewModel(BaseModel):
    """Base for immutable view models."""

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Device Health Models
# =============================================================================


class RoleStats(ViewModel):
    """Per-role device count and averages.

    Averages are None ("unavailable") when the role has no devices.
    """

    role: DeviceRole = Field(description='Network role')
    label: str = Field(description='Display label for the role')
    count: int = Field(default=0, description='Number of devices with this role')
    avg_cpu: int | None = Field(default=None, description='Mean CPU usage %, rounded half-up')
    avg_memory: int | None = Field(default=None, description='Mean memory usage %, rounded half-up')
    avg_health: int | None = Field(default=None, description='Mean health score, rounded half-up')

    @property
    def available(self) -> bool:
        """Check if averages could be computed."""
        return self.count > 0


class RoleBreakdown(ViewModel):
    """Device health grouped by the three known roles."""

    roles: list[RoleStats] = Field(description='One entry per known role, in hierarchy order')
    ignored: int = Field(default=0, description='Devices with a role outside the hierarchy')

    def get(self, role: DeviceRole | str) -> RoleStats:
        """Get the stats bucket for a role."""
        role = DeviceRole(role)
        for stats in self.roles:
            if stats.role == role:
                return stats
        raise KeyError(role)

    @property
    def counted(self) -> int:
        """Total devices across the known roles."""
        return sum(stats.count for stats in self.roles)


class UptimeExtrema(ViewModel):
    """Longest and shortest running device."""

    longest: Device | None = Field(default=None, description='Device with maximum uptime')
    shortest: Device | None = Field(default=None, description='Device with minimum uptime')


# =============================================================================
# Automation Models
# =============================================================================


class RecentTask(ViewModel):
    """Row of the recent automation tasks table."""

    task_id: str
    task_type: str
    device_count: int = Field(description='Number of devices involved')
    started_at: datetime | None
    duration_seconds: float | None = Field(description='end - start, None when unknown')
    status: str


class AutomationView(ViewModel):
    """Automation task outcomes for the selected range."""

    total: int = 0
    success: int = 0
    failed: int = 0
    success_rate: int = Field(default=0, description='success / total as whole percent')
    by_type: dict[str, int] = Field(default_factory=dict, description='Task count per type')
    recent: list[RecentTask] = Field(default_factory=list, description='Up to 5 most recent tasks')


# =============================================================================
# Compliance Models
# =============================================================================


class ComplianceState(str, Enum):
    """What the compliance panel should show."""

    NO_DATA = 'no_data'
    ALL_COMPLIANT = 'all_compliant'
    FINDINGS = 'findings'


class NonCompliantDevice(ViewModel):
    """Device whose verdict is not compliant, with its failed rule count."""

    device_id: str
    device_name: str
    status: str
    failed_rules: list[str] = Field(default_factory=list)
    failed_rule_count: int = 0


class ComplianceView(ViewModel):
    """Compliance posture rollup."""

    overall_percent: float | None = Field(
        default=None, description='Overall compliance %, None when not supplied or invalid'
    )
    compliant: int = 0
    warning: int = 0
    non_compliant: int = 0
    state: ComplianceState = ComplianceState.NO_DATA
    non_compliant_devices: list[NonCompliantDevice] = Field(default_factory=list)
    rules: list[ComplianceRule] = Field(default_factory=list, description='External rule catalog')

    @property
    def all_compliant(self) -> bool:
        """Check if verdicts exist and none of them is a finding."""
        return self.state == ComplianceState.ALL_COMPLIANT


# =============================================================================
# Alert Models
# =============================================================================


class DailyAlertCount(ViewModel):
    """Alerts opened on one UTC calendar day."""

    day: str = Field(description='ISO date (YYYY-MM-DD)')
    count: int


class RecentAlert(ViewModel):
    """Row of the recent alerts table."""

    id: str
    device_id: str
    device_name: str = Field(description='Resolved device name, falls back to device id')
    severity: str
    type: str
    opened_at: datetime | None
    status: str


class AlertView(ViewModel):
    """Alert histogram, daily series and recent alerts."""

    total: int = 0
    open: int = 0
    closed: int = 0
    severity_histogram: dict[str, int] = Field(default_factory=dict)
    per_day: list[DailyAlertCount] = Field(default_factory=list)
    recent: list[RecentAlert] = Field(default_factory=list)


# =============================================================================
# Configuration Snapshot Models
# =============================================================================


class SnapshotPair(ViewModel):
    """Two most recent configuration backups of a device."""

    kind: Literal['pair'] = 'pair'
    device_id: str
    before: ConfigSnapshot
    after: ConfigSnapshot
    dropped: int = Field(default=0, description='Malformed or undated snapshots ignored')


class InsufficientHistory(ViewModel):
    """Device has fewer than two usable configuration backups."""

    kind: Literal['insufficient_history'] = 'insufficient_history'
    device_id: str
    available: int = Field(default=0, description='Usable snapshots found')
    dropped: int = Field(default=0, description='Malformed or undated snapshots ignored')

    @property
    def message(self) -> str:
        """Empty-state text for the config diff panel."""
        return (
            f'Not enough backup history for {self.device_id}. '
            'Run at least two backups to see diff.'
        )


ConfigDiff = SnapshotPair | InsufficientHistory


# =============================================================================
# Trend / Recommendation / KPI Models
# =============================================================================


class TrendSeries(ViewModel):
    """Validated trend series for the selected range."""

    range_days: int
    points: list[TrendPoint] = Field(default_factory=list)
    dropped: int = Field(default=0, description='Points rejected by validation')


class RecommendationCategory(ViewModel):
    """One recommendation category with its fallback applied."""

    category: str
    items: list[str] = Field(default_factory=list)
    is_fallback: bool = Field(default=False, description='True when items hold fallback text')


class RecommendationView(ViewModel):
    """Recommendation panel content."""

    categories: list[RecommendationCategory] = Field(default_factory=list)

    def get(self, category: str) -> RecommendationCategory:
        """Get one category by name."""
        for entry in self.categories:
            if entry.category == category:
                return entry
        raise KeyError(category)


class KpiSummary(ViewModel):
    """Header KPIs of the dashboard."""

    total_devices: int = 0
    role_counts: dict[str, int] = Field(default_factory=dict)
    avg_health: int = Field(default=0, description='Fleet-wide mean health, rounded half-up')
    automation_success_rate: int = 0
    open_alerts: int = 0
