"""
Exception hierarchy for the RavenDB binding.

Provides layered exception structure for binding errors.
All exceptions include context for observability and debugging.

NOT_FOUND and NOT_IMPLEMENTED are harness statuses, not exceptions.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the binding
"""

from typing import Any


class YCSBBindingException(Exception):
    """Base exception for all binding errors."""

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


class ConfigurationError(YCSBBindingException):
    """Raised when a configuration value fails validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            field: Settings field that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentStoreError(YCSBBindingException):
    """Raised when a request to the document store fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document store error.

        Args:
            message: Error message
            operation: Operation that failed (get, put, delete, ...)
            status_code: HTTP status returned by the server, if any
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class ProvisioningError(YCSBBindingException):
    """Raised when the database existence check or creation fails."""

    def __init__(
        self,
        message: str,
        database: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provisioning error.

        Args:
            message: Error message
            database: Database being provisioned
            details: Additional context
        """
        details = details or {}
        if database:
            details["database"] = database
        super().__init__(message, details)


class CleanupError(YCSBBindingException):
    """Raised when releasing the document store handle fails."""

    pass


class UnknownBindingError(YCSBBindingException):
    """Raised when a binding name is not registered."""

    def __init__(self, name: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize unknown binding error.

        Args:
            name: Requested binding name
            details: Additional context
        """
        details = details or {}
        details["binding"] = name
        super().__init__(f"Unknown binding: {name}", details)
