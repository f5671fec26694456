"""Compliance verdict models."""

from campus_noc.models.common import Identifier, Label, StringList
from campus_noc.models.device import ComplianceStatus
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Literal


class ComplianceRecord(BaseModel):
    """Per-device verdict computed by the external rule engine."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    device_id: Identifier = Field(alias='deviceId', description='Device identifier')
    device_name: Label = Field(default='', alias='deviceName', description='Device display name')
    status: Label = Field(description='compliant, warning or non-compliant')
    failed_rules: StringList = Field(
        default_factory=list, alias='failedRules', description='Failed rule identifiers, in order'
    )

    @model_validator(mode='after')
    def _failed_rules_required(self) -> 'ComplianceRecord':
        if not self.is_compliant and not self.failed_rules:
            raise ValueError(f'status {self.status!r} requires at least one failed rule')
        return self

    @property
    def is_compliant(self) -> bool:
        """Check if the verdict is compliant."""
        return self.status.lower() == ComplianceStatus.COMPLIANT.value


class ComplianceRule(BaseModel):
    """Entry of the external compliance rule catalog (display only)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description='Rule identifier as reported in failed rule lists')
    name: str = Field(description='Human-readable rule name')
    severity: Literal['high', 'medium', 'low'] = Field(description='Rule severity')


# Fixed catalog of rules evaluated by the compliance engine
RULE_CATALOG: tuple[ComplianceRule, ...] = (
    ComplianceRule(id='SSH enabled', name='SSH enabled (no Telnet)', severity='high'),
    ComplianceRule(
        id="SNMP community not 'public'", name="SNMP community not 'public'", severity='high'
    ),
    ComplianceRule(id='NTP configured', name='NTP configured', severity='medium'),
    ComplianceRule(id='Banner configured', name='Security login banner present', severity='low'),
)
