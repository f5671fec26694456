"""Unit tests for trend series validation."""

import pytest
from campus_noc.aggregators.trends import assemble_trends, trend_points
from campus_noc.utils.errors import DashboardError, ErrorCodes
from datetime import date


class TestAssembleTrends:
    """Test assemble_trends."""

    def test_valid_points_keep_order(self):
        """Test points pass through in backend order."""
        points = [
            {'date': '2024-05-02', 'avgHealthScore': 85, 'automationSuccessRate': 90},
            {'date': '2024-05-01', 'avgHealthScore': 80, 'automationSuccessRate': 95},
        ]

        series = assemble_trends(7, points)

        assert series.range_days == 7
        assert [point.day for point in series.points] == [date(2024, 5, 2), date(2024, 5, 1)]
        assert series.dropped == 0

    def test_invalid_points_dropped(self):
        """Test bad points are dropped and counted."""
        points = [
            {'date': '2024-05-01', 'avgHealthScore': 80, 'automationSuccessRate': 95},
            {'date': '2024-05-02', 'avgHealthScore': 101, 'automationSuccessRate': 95},
            {'date': None, 'avgHealthScore': 80, 'automationSuccessRate': 95},
            {'date': '2024-05-04', 'avgHealthScore': 80},
        ]

        series = assemble_trends(30, points)

        assert len(series.points) == 1
        assert series.dropped == 3

    @pytest.mark.parametrize('range_days', [0, 14, 90, -7])
    def test_unsupported_range(self, range_days):
        """Test only 7 and 30 day windows are accepted."""
        with pytest.raises(DashboardError) as exc_info:
            assemble_trends(range_days, [])

        assert exc_info.value.error_code == ErrorCodes.INVALID_RANGE

    def test_missing_points(self):
        """Test no points gives an empty series."""
        series = assemble_trends(7, None)
        assert series.points == []
        assert series.dropped == 0


class TestTrendPoints:
    """Test trend_points."""

    def test_unwrap(self):
        """Test the data wrapper and bare lists."""
        assert trend_points({'data': [{'date': '2024-05-01'}]}) == [{'date': '2024-05-01'}]
        assert trend_points([1, 2]) == [1, 2]
        assert trend_points({'data': 'nope'}) == []
        assert trend_points(None) == []
