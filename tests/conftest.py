"""Shared pytest fixtures for the dashboard aggregation tests."""

import pytest
from campus_noc.models import Device
from campus_noc.utils.settings import BackendSettings


@pytest.fixture
def sample_settings() -> BackendSettings:
    """Backend settings pointing at a local test backend."""
    return BackendSettings(api_url='http://backend.test:8000/api', timeout=5.0)


@pytest.fixture
def device_records() -> list[dict]:
    """Raw device inventory as delivered by the backend."""
    return [
        {
            'id': 'core-rtr-01',
            'name': 'Core Router 1',
            'role': 'router',
            'layer': 'core',
            'ipAddress': '10.0.0.1',
            'model': 'ISR4451',
            'osVersion': '17.9.4',
            'healthScore': 70,
            'cpuUsage': 40,
            'memoryUsage': 55,
            'uptimeHours': 1000,
            'complianceStatus': 'compliant',
            'lastConfigBackup': '2024-05-01T08:00:00Z',
        },
        {
            'id': 'acc-sw-01',
            'name': 'Access Switch 1',
            'role': 'access-switch',
            'layer': 'access',
            'ipAddress': '10.0.2.1',
            'healthScore': 90,
            'cpuUsage': 20,
            'memoryUsage': 30,
            'uptimeHours': 50,
            'complianceStatus': 'warning',
        },
        {
            'id': 'acc-sw-02',
            'name': 'Access Switch 2',
            'role': 'access-switch',
            'layer': 'access',
            'ipAddress': '10.0.2.2',
            'healthScore': 90,
            'cpuUsage': 30,
            'memoryUsage': 41,
            'uptimeHours': 75,
            'complianceStatus': 'non-compliant',
        },
    ]


@pytest.fixture
def sample_devices(device_records) -> list[Device]:
    """Validated device inventory (one router, two access switches)."""
    return [Device.model_validate(record) for record in device_records]


@pytest.fixture
def make_device():
    """Factory for devices with sensible defaults."""

    def _make(device_id: str, role: str = 'access-switch', **fields) -> Device:
        return Device.model_validate({'id': device_id, 'name': device_id.upper(), 'role': role, **fields})

    return _make

