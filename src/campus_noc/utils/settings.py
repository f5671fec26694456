"""Backend connection settings loaded from the environment."""

import os
from campus_noc.utils.errors import DashboardError, ErrorCodes
from dotenv import load_dotenv
from pathlib import Path
from pydantic import BaseModel, Field


DEFAULT_API_URL = 'http://localhost:8000/api'
DEFAULT_TIMEOUT = 30.0


class BackendSettings(BaseModel):
    """Dashboard backend settings."""

    api_url: str = Field(default=DEFAULT_API_URL, description='Backend API base URL')
    timeout: float = Field(default=DEFAULT_TIMEOUT, description='Transport timeout in seconds')
    verify_ssl: bool = Field(default=True, description='Verify SSL certificate')
    log_level: str = Field(default='INFO', description='Log level for the loguru sinks')

    @classmethod
    def from_env(cls, env_file: str | None = None) -> 'BackendSettings':
        """Load settings from environment variables.

        Supports:
        - CAMPUS_NOC_API_URL for the backend base URL
        - CAMPUS_NOC_TIMEOUT for the transport timeout (clamped to 1-300 seconds)
        - CAMPUS_NOC_VERIFY_SSL (true/false)
        - CAMPUS_NOC_LOG_LEVEL

        Args:
            env_file: Optional .env file loaded before reading the environment.
                Variables already set in the environment take precedence.
        """
        if env_file:
            env_path = Path(env_file).expanduser()
            if not env_path.exists():
                raise DashboardError(
                    message=f'Configuration file not found: {env_path}',
                    error_code=ErrorCodes.CONFIG_INVALID,
                    suggestion='Pass an existing .env file or omit --env-file',
                )
            load_dotenv(env_path, override=False)

        api_url = os.environ.get('CAMPUS_NOC_API_URL', DEFAULT_API_URL).strip().rstrip('/')
        if not api_url.startswith(('http://', 'https://')):
            raise DashboardError(
                message=f'Invalid CAMPUS_NOC_API_URL: {api_url!r}',
                error_code=ErrorCodes.CONFIG_INVALID,
                suggestion='Set CAMPUS_NOC_API_URL=http://backend-host:8000/api',
            )

        raw_timeout = os.environ.get('CAMPUS_NOC_TIMEOUT', str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise DashboardError(
                message=f'Invalid CAMPUS_NOC_TIMEOUT: {raw_timeout!r}',
                error_code=ErrorCodes.CONFIG_INVALID,
                suggestion='Set CAMPUS_NOC_TIMEOUT to a number of seconds',
            )
        timeout = max(1.0, min(timeout, 300.0))

        verify_ssl = os.environ.get('CAMPUS_NOC_VERIFY_SSL', 'true').lower() == 'true'

        return cls(
            api_url=api_url,
            timeout=timeout,
            verify_ssl=verify_ssl,
            log_level=os.environ.get('CAMPUS_NOC_LOG_LEVEL', 'INFO').upper(),
        )
