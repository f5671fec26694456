"""Automation task models."""

from campus_noc.models.common import Identifier, Label, StringList, Timestamp
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Known automation task outcomes."""

    SUCCESS = 'success'
    FAILED = 'failed'


class AutomationTask(BaseModel):
    """One automation run as logged by the automation runner."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    task_id: Identifier = Field(alias='taskId', description='Unique task identifier')
    task_type: Label = Field(default='', alias='taskType', description='Free-form task type')
    devices_involved: StringList = Field(
        default_factory=list, alias='devicesInvolved', description='Device identifiers'
    )
    started_at: Timestamp = Field(default=None, alias='startedAt', description='Start time')
    ended_at: Timestamp = Field(default=None, alias='endedAt', description='End time')
    status: Label = Field(default='', description='success or failed')

    @property
    def known_status(self) -> TaskStatus | None:
        """Status as an enum, or None when the runner reported something else."""
        try:
            return TaskStatus(self.status.lower())
        except ValueError:
            return None
