"""Unit tests for header KPIs."""

from campus_noc.aggregators.kpis import build_kpis
from campus_noc.models import AlertView, AutomationView


class TestBuildKpis:
    """Test build_kpis."""

    def test_header_figures(self, sample_devices):
        """Test totals, role counts and fleet-wide health."""
        kpis = build_kpis(
            sample_devices,
            AutomationView(total=10, success=7, failed=3, success_rate=70),
            AlertView(total=5, open=4, closed=1),
        )

        assert kpis.total_devices == 3
        assert kpis.role_counts['access-switch'] == 2
        assert kpis.avg_health == 83  # 250 / 3
        assert kpis.automation_success_rate == 70
        assert kpis.open_alerts == 4

    def test_empty_fleet(self):
        """Test an empty inventory."""
        kpis = build_kpis([], AutomationView(), AlertView())

        assert kpis.total_devices == 0
        assert kpis.avg_health == 0
        assert kpis.role_counts == {'router': 0, 'distribution-switch': 0, 'access-switch': 0}
