"""
Exception hierarchy for the Job Tracker application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class JobTrackerException(Exception):
    """Base exception for all Job Tracker application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(JobTrackerException):
    """Raised when required configuration is missing or unusable."""

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            missing: Names of the settings that are not set
            details: Additional context
        """
        details = details or {}
        if missing:
            details["missing"] = missing
        super().__init__(message, details)


class SheetsBackendError(JobTrackerException):
    """Raised when a spreadsheet operation fails (auth, transport, API error)."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize spreadsheet backend error.

        Args:
            message: Error message
            operation: Operation that failed (append, get)
            status_code: HTTP status returned by the Sheets API, if any
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if status_code is not None:
            details["status_code"] = status_code
        self.operation = operation
        self.status_code = status_code
        super().__init__(message, details)


class MalformedSheetDataError(JobTrackerException):
    """Raised when sheet values are not a two-dimensional array of cells."""

    pass


class TrackerApiError(JobTrackerException):
    """Raised by the page's API client when a handler call fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize handler call error.

        Args:
            message: User-facing failure message
            status_code: HTTP status of the handler response, None on transport failure
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class InvalidRequestBodyError(JobTrackerException):
    """Raised when a handler body is not JSON or does not fit the request schema."""

    pass
