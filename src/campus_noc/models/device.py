"""Device model for campus LAN inventory records."""

from campus_noc.models.common import Identifier, Label, NonNegative, Percent, Timestamp
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class DeviceRole(str, Enum):
    """Position of a device in the campus hierarchy."""

    ROUTER = 'router'
    DISTRIBUTION_SWITCH = 'distribution-switch'
    ACCESS_SWITCH = 'access-switch'


class ComplianceStatus(str, Enum):
    """Compliance verdict delivered by the external rule engine."""

    COMPLIANT = 'compliant'
    WARNING = 'warning'
    NON_COMPLIANT = 'non-compliant'


# Backend spellings that map onto a known role
ROLE_ALIASES = {
    'dist-switch': DeviceRole.DISTRIBUTION_SWITCH.value,
    'distribution': DeviceRole.DISTRIBUTION_SWITCH.value,
    'access': DeviceRole.ACCESS_SWITCH.value,
}


class Device(BaseModel):
    """Campus network device snapshot.

    Metrics are clamped to [0, 100] by the device registry. Anything missing or
    out of range is kept as None so a single bad reading never rejects the device.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Identifier = Field(description='Unique device identifier')
    name: Label = Field(default='', description='Display name')
    role: Label = Field(default='', description='Network role (router, distribution-switch, access-switch)')
    layer: Label = Field(default='', description='Network layer label')
    ip_address: Label = Field(default='', alias='ipAddress', description='Management IP address')
    model: Label = Field(default='', description='Hardware model')
    os_version: Label = Field(default='', alias='osVersion', description='OS version')
    health_score: Percent = Field(default=None, alias='healthScore', description='Health score 0-100')
    cpu_usage: Percent = Field(default=None, alias='cpuUsage', description='CPU usage %')
    memory_usage: Percent = Field(default=None, alias='memoryUsage', description='Memory usage %')
    uptime_hours: NonNegative = Field(default=None, alias='uptimeHours', description='Uptime in hours')
    compliance_status: Label = Field(
        default='', alias='complianceStatus', description='compliant, warning or non-compliant'
    )
    last_config_backup: Timestamp = Field(
        default=None, alias='lastConfigBackup', description='Last configuration backup time'
    )

    @field_validator('role', mode='after')
    @classmethod
    def _normalize_role(cls, value: str) -> str:
        role = value.lower()
        return ROLE_ALIASES.get(role, role)

    @property
    def known_role(self) -> DeviceRole | None:
        """Role as an enum, or None for roles outside the campus hierarchy."""
        try:
            return DeviceRole(self.role)
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        """Get display name, falling back to the identifier if name is empty."""
        return self.name if self.name else self.id


def index_devices(devices: list[Device]) -> dict[str, Device]:
    """Build the device identity lookup (first occurrence wins on duplicate ids)."""
    index: dict[str, Device] = {}
    for device in devices:
        index.setdefault(device.id, device)
    return index


def device_label(device_id: str, index: dict[str, Device]) -> str:
    """Resolve a device id to its display name via the identity lookup."""
    device = index.get(device_id)
    return device.display_name if device else device_id
