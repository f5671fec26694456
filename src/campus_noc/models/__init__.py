"""Pydantic models for dashboard records and view models."""

from campus_noc.models.alert import AlertEvent, AlertSeverity
from campus_noc.models.compliance import RULE_CATALOG, ComplianceRecord, ComplianceRule
from campus_noc.models.dashboard import DashboardState, DashboardView
from campus_noc.models.device import ComplianceStatus, Device, DeviceRole
from campus_noc.models.recommendation import RECOMMENDATION_CATEGORIES, RecommendationBundle
from campus_noc.models.snapshot import ConfigSnapshot
from campus_noc.models.task import AutomationTask, TaskStatus
from campus_noc.models.trend import TrendPoint
from campus_noc.models.views import (
    AlertView,
    AutomationView,
    ComplianceState,
    ComplianceView,
    ConfigDiff,
    DailyAlertCount,
    InsufficientHistory,
    KpiSummary,
    NonCompliantDevice,
    RecentAlert,
    RecentTask,
    RecommendationCategory,
    RecommendationView,
    RoleBreakdown,
    RoleStats,
    SnapshotPair,
    TrendSeries,
    UptimeExtrema,
)

__all__ = [
    'AlertEvent',
    'AlertSeverity',
    'AlertView',
    'AutomationTask',
    'AutomationView',
    'ComplianceRecord',
    'ComplianceRule',
    'ComplianceState',
    'ComplianceStatus',
    'ComplianceView',
    'ConfigDiff',
    'ConfigSnapshot',
    'DailyAlertCount',
    'DashboardState',
    'DashboardView',
    'Device',
    'DeviceRole',
    'InsufficientHistory',
    'KpiSummary',
    'NonCompliantDevice',
    'RECOMMENDATION_CATEGORIES',
    'RULE_CATALOG',
    'RecentAlert',
    'RecentTask',
    'RecommendationBundle',
    'RecommendationCategory',
    'RecommendationView',
    'RoleBreakdown',
    'RoleStats',
    'SnapshotPair',
    'TaskStatus',
    'TrendPoint',
    'TrendSeries',
    'UptimeExtrema',
]
