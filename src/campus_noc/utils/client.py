"""Async dashboard backend API client.

Provides read access to the dashboard backend:
- Device inventory
- Automation task summary for a range
- Compliance rollup and alert summary
- Trend series and recommendation bundle
- Configuration snapshot history per device

Timeouts are enforced by the httpx transport; this client never retries.
"""

import httpx
from campus_noc.utils.errors import DashboardError, ErrorCodes
from campus_noc.utils.settings import BackendSettings
from loguru import logger
from typing import Any
from urllib.parse import quote


class DashboardClient:
    """Async dashboard backend client."""

    def __init__(self, settings: BackendSettings | None = None):
        """Initialize dashboard client.

        Args:
            settings: Optional settings (loaded from the environment if not provided)
        """
        self._settings = settings
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> 'DashboardClient':
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.disconnect()

    async def connect(self) -> None:
        """Create the underlying HTTP client."""
        if self._client:
            return

        if not self._settings:
            self._settings = BackendSettings.from_env()

        self._client = httpx.AsyncClient(
            base_url=self._settings.api_url,
            verify=self._settings.verify_ssl,
            timeout=httpx.Timeout(self._settings.timeout),
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
        )
        logger.debug('Dashboard client connected', api_url=self._settings.api_url)

    async def disconnect(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            try:
                await self._client.aclose()
            finally:
                self._client = None

    async def get(self, path: str, **params: Any) -> Any:
        """Make GET request to the backend.

        Args:
            path: API path relative to the base URL (e.g., '/devices')
            **params: Query parameters

        Returns:
            Decoded JSON response

        Raises:
            DashboardError: For HTTP errors, network problems or invalid JSON
        """
        if not self._client:
            await self.connect()

        return await self._request('GET', path, params=params)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Make request to the backend."""
        if not self._client:
            raise DashboardError(
                message='Client not connected',
                error_code=ErrorCodes.BACKEND_ERROR,
            )

        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise DashboardError(
                    message=f'Not found: {path}',
                    error_code=ErrorCodes.DEVICE_NOT_FOUND
                    if path.startswith('/config/')
                    else ErrorCodes.BACKEND_ERROR,
                )
            raise DashboardError(
                message=f'HTTP {e.response.status_code}: {e.response.text}',
                error_code=ErrorCodes.BACKEND_ERROR,
            )
        except httpx.RequestError as e:
            raise DashboardError(
                message=f'Request failed: {e}',
                error_code=ErrorCodes.BACKEND_UNREACHABLE,
                suggestion='Check network connectivity and backend status',
            )
        except ValueError as e:
            raise DashboardError(
                message=f'Invalid JSON from {path}: {e}',
                error_code=ErrorCodes.BACKEND_ERROR,
            )

    # =========================================================================
    # Dashboard data
    # =========================================================================

    async def get_devices(self) -> Any:
        """Get the device inventory (list or ``{"devices": [...]}``)."""
        return await self.get('/devices')

    async def get_automation_summary(self, range_days: int) -> Any:
        """Get the automation task summary for the trailing range."""
        return await self.get('/automation/summary', range=range_days)

    async def get_compliance(self) -> Any:
        """Get the compliance rollup."""
        return await self.get('/compliance')

    async def get_alerts(self) -> Any:
        """Get the alert summary."""
        return await self.get('/alerts')

    async def get_trends(self, range_days: int) -> Any:
        """Get the trend series for the trailing range."""
        return await self.get('/trends', range=range_days)

    async def get_recommendations(self) -> Any:
        """Get the recommendation bundle."""
        return await self.get('/recommendations')

    async def get_config_history(self, device_id: str) -> Any:
        """Get the configuration snapshot history of one device.

        Args:
            device_id: Device identifier
        """
        return await self.get(f'/config/{quote(device_id, safe="")}')

    @property
    def is_connected(self) -> bool:
        """Check if the HTTP client is open."""
        return self._client is not None
