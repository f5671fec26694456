"""Unit tests for the recommendation panel."""

from campus_noc.aggregators.recommendations import (
    fallback_text,
    parse_recommendations,
    render_recommendations,
)
from campus_noc.models import RECOMMENDATION_CATEGORIES, RecommendationBundle


class TestRenderRecommendations:
    """Test render_recommendations."""

    def test_fallback_for_empty_categories(self):
        """Test empty categories show fallback text, others pass through."""
        bundle = RecommendationBundle(
            performance=['Upgrade uplink on acc-sw-02 to 10G'],
            compliance=['Disable Telnet on 3 devices'],
        )

        view = render_recommendations(bundle)

        assert [entry.category for entry in view.categories] == list(RECOMMENDATION_CATEGORIES)
        assert view.get('performance').items == ['Upgrade uplink on acc-sw-02 to 10G']
        assert not view.get('performance').is_fallback
        assert view.get('reliability').items == ['No reliability-related insights.']
        assert view.get('reliability').is_fallback
        assert view.get('automation').items == [fallback_text('automation')]

    def test_all_empty(self):
        """Test every category falls back."""
        view = render_recommendations(RecommendationBundle())
        assert all(entry.is_fallback for entry in view.categories)


class TestParseRecommendations:
    """Test parse_recommendations."""

    def test_insights_wrapper(self):
        """Test the insights envelope is unwrapped."""
        bundle = parse_recommendations({'insights': {'reliability': ['Add redundant PSU']}})
        assert bundle.reliability == ['Add redundant PSU']

    def test_bare_bundle_ignores_unknown_keys(self):
        """Test unknown keys and non-list categories."""
        bundle = parse_recommendations(
            {'automation': ['Schedule nightly backups'], 'security': ['x'], 'performance': None}
        )

        assert bundle.automation == ['Schedule nightly backups']
        assert bundle.performance == []

    def test_missing_payload(self):
        """Test no payload gives an empty bundle."""
        assert parse_recommendations(None) == RecommendationBundle()
