"""Historical trend point model."""

from campus_noc.models.common import Day, Metric
from pydantic import BaseModel, ConfigDict, Field


class TrendPoint(BaseModel):
    """Daily fleet health and automation success sample."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    day: Day = Field(alias='date', description='Sample day')
    avg_health_score: Metric = Field(alias='avgHealthScore', description='Average health score')
    automation_success_rate: Metric = Field(
        alias='automationSuccessRate', description='Automation success rate %'
    )
