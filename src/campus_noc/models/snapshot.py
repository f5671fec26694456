"""Configuration backup snapshot model."""

from campus_noc.models.common import Label, StringList, Timestamp
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ConfigSnapshot(BaseModel):
    """One point-in-time configuration backup of a device.

    The change summary lines are produced by the backup system and are never
    rewritten here.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    device_id: Label = Field(default='', alias='deviceId', description='Owning device identifier')
    config_version: Label = Field(default='', alias='configVersion', description='Version label')
    timestamp: Timestamp = Field(default=None, description='When the backup was taken')
    change_summary: StringList = Field(
        default_factory=list,
        validation_alias=AliasChoices('changeSummary', 'changes', 'change_summary'),
        description='Human-readable change lines',
    )
