"""Recommendation panel with per-category fallback text."""

from campus_noc.models import (
    RECOMMENDATION_CATEGORIES,
    RecommendationBundle,
    RecommendationCategory,
    RecommendationView,
)
from campus_noc.utils.validation import as_dict
from typing import Any


def fallback_text(category: str) -> str:
    """Text shown when the advisory engine has nothing for a category."""
    return f'No {category}-related insights.'


def render_recommendations(bundle: RecommendationBundle) -> RecommendationView:
    """Pass advisory text through, substituting fallback text for empty categories."""
    categories = []
    for category in RECOMMENDATION_CATEGORIES:
        items = list(getattr(bundle, category))
        if items:
            categories.append(RecommendationCategory(category=category, items=items))
        else:
            categories.append(
                RecommendationCategory(
                    category=category, items=[fallback_text(category)], is_fallback=True
                )
            )
    return RecommendationView(categories=categories)


def parse_recommendations(payload: Any) -> RecommendationBundle:
    """Unwrap the bundle from ``{"insights": {...}}`` or a bare bundle.

    Unknown keys are ignored and non-list categories count as absent.
    """
    payload = as_dict(payload)
    insights = payload.get('insights')
    bundle = as_dict(insights) if insights is not None else payload
    return RecommendationBundle.model_validate(
        {category: bundle.get(category) or [] for category in RECOMMENDATION_CATEGORIES}
    )
