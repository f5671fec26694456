"""Recommendation bundle from the external advisory engine."""

from campus_noc.models.common import StringList
from pydantic import BaseModel, ConfigDict, Field


RECOMMENDATION_CATEGORIES = ('performance', 'reliability', 'compliance', 'automation')


class RecommendationBundle(BaseModel):
    """Advisory text grouped by category, passed through untouched."""

    model_config = ConfigDict(frozen=True)

    performance: StringList = Field(default_factory=list)
    reliability: StringList = Field(default_factory=list)
    compliance: StringList = Field(default_factory=list)
    automation: StringList = Field(default_factory=list)
