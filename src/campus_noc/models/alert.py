"""Alert event models."""

from campus_noc.models.common import Identifier, Label, Timestamp
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class AlertSeverity(str, Enum):
    """Alert severities shown in the histogram, most severe first."""

    CRITICAL = 'critical'
    MAJOR = 'major'
    MINOR = 'minor'


class AlertEvent(BaseModel):
    """Alert raised by the alerting system."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Identifier = Field(description='Unique alert identifier')
    device_id: Label = Field(default='', alias='deviceId', description='Device the alert concerns')
    severity: Label = Field(default='', description='critical, major or minor')
    type: Label = Field(default='', description='Alert type label')
    opened_at: Timestamp = Field(default=None, alias='openedAt', description='When the alert opened')
    status: Label = Field(default='', description='open or closed')
