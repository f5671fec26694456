"""Aggregators turning raw dashboard records into view models."""

from campus_noc.aggregators.alerts import bucketize_alerts, bucketize_alerts_payload
from campus_noc.aggregators.automation import summarize_automation, summarize_automation_payload
from campus_noc.aggregators.compliance import rollup_compliance, rollup_compliance_payload
from campus_noc.aggregators.kpis import build_kpis
from campus_noc.aggregators.recommendations import parse_recommendations, render_recommendations
from campus_noc.aggregators.roles import aggregate_roles
from campus_noc.aggregators.snapshots import parse_snapshot_history, resolve_config_diff
from campus_noc.aggregators.trends import assemble_trends, trend_points
from campus_noc.aggregators.uptime import format_uptime, select_uptime_extrema

__all__ = [
    'aggregate_roles',
    'assemble_trends',
    'build_kpis',
    'bucketize_alerts',
    'bucketize_alerts_payload',
    'format_uptime',
    'parse_recommendations',
    'parse_snapshot_history',
    'render_recommendations',
    'resolve_config_diff',
    'rollup_compliance',
    'rollup_compliance_payload',
    'select_uptime_extrema',
    'summarize_automation',
    'summarize_automation_payload',
    'trend_points',
]
