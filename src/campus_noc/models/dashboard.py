"""Unified dashboard view model and versioned dashboard state."""

from campus_noc.models.device import Device
from campus_noc.models.views import (
    AlertView,
    AutomationView,
    ComplianceView,
    ConfigDiff,
    KpiSummary,
    RecommendationView,
    RoleBreakdown,
    TrendSeries,
    UptimeExtrema,
)
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class DashboardView(BaseModel):
    """Everything the dashboard renders for one successful refresh."""

    model_config = ConfigDict(frozen=True)

    range_days: int = Field(description='Selected trailing window in days')
    generated_at: datetime = Field(description='When the aggregation pass ran')
    devices: list[Device] = Field(default_factory=list, description='Device inventory')
    kpis: KpiSummary
    roles: RoleBreakdown
    uptime: UptimeExtrema
    automation: AutomationView
    compliance: ComplianceView
    alerts: AlertView
    trends: TrendSeries
    recommendations: RecommendationView
    diagnostics: dict[str, int] = Field(
        default_factory=dict, description='Malformed records dropped, per source'
    )


class DashboardState(BaseModel):
    """Orchestrator-owned state, replaced as a whole on every change."""

    model_config = ConfigDict(frozen=True)

    version: int = Field(default=0, description='Incremented on every replacement')
    range_days: int | None = None
    selected_device_id: str | None = None
    view: DashboardView | None = None
    config_diff: ConfigDiff | None = Field(default=None, description='Selected device config diff')

    @property
    def loaded(self) -> bool:
        """Check if at least one refresh succeeded."""
        return self.view is not None
