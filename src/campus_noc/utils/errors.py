"""Structured errors for the dashboard aggregation layer."""


class DashboardError(Exception):
    """Structured error raised across the aggregation layer boundary."""

    def __init__(
        self,
        message: str,
        error_code: str,
        suggestion: str | None = None,
        related_operations: list[str] | None = None,
    ):
        """Initialize dashboard error with structured context.

        Args:
            message: Human-readable error description
            error_code: Structured error code (e.g., 'TRANSPORT_FAILURE')
            suggestion: Optional recovery suggestion for the user
            related_operations: Optional list of operations that might help resolve the issue
        """
        self.message = message
        self.error_code = error_code
        self.suggestion = suggestion
        self.related_operations = related_operations or []
        super().__init__(self._format())

    def _format(self) -> str:
        """Format error message with structured information."""
        parts = [f'[{self.error_code}] {self.message}']

        if self.suggestion:
            parts.append(f'Suggestion: {self.suggestion}')

        if self.related_operations:
            parts.append(f'Related operations: {", ".join(self.related_operations)}')

        return '\n'.join(parts)

    def to_dict(self) -> dict[str, str | list[str]]:
        """Convert to dictionary for structured logging."""
        return {
            'error_code': self.error_code,
            'message': self.message,
            'suggestion': self.suggestion or '',
            'related_operations': self.related_operations,
        }


class TransportFailure(DashboardError):
    """A fetch in a refresh batch failed; the whole batch is discarded."""

    def __init__(self, source: str, cause: Exception | str):
        """Initialize transport failure.

        Args:
            source: Name of the fetch that failed (e.g., 'devices', 'alerts')
            cause: Underlying exception or message
        """
        self.source = source
        self.cause = cause
        super().__init__(
            message=f'Failed to load {source} from backend: {cause}',
            error_code=ErrorCodes.TRANSPORT_FAILURE,
            suggestion='Check backend availability and refresh the dashboard',
        )

    def to_dict(self) -> dict[str, str | list[str]]:
        """Convert to dictionary, including the failing source."""
        data = super().to_dict()
        data['source'] = self.source
        return data


# Common error codes for consistency
class ErrorCodes:
    """Standard error codes for the dashboard layer."""

    # Backend/transport errors
    TRANSPORT_FAILURE = 'TRANSPORT_FAILURE'
    BACKEND_UNREACHABLE = 'BACKEND_UNREACHABLE'
    BACKEND_ERROR = 'BACKEND_ERROR'

    # Request errors
    INVALID_RANGE = 'INVALID_RANGE'
    DEVICE_NOT_FOUND = 'DEVICE_NOT_FOUND'

    # Configuration errors
    CONFIG_INVALID = 'CONFIG_INVALID'
