"""Domain exceptions for the tracker application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TrackerException(Exception):
    """Base exception for all tracker application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the JSON error body."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TrackerException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(TrackerException):
    """Raised when authentication fails (e.g. invalid credentials or token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(TrackerException):
    """Raised when the admin is a member of the server but lacks rights for the action."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'server').
            action: Optional action that was attempted (e.g. 'delete').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(TrackerException):
    """Raised when a requested resource is not found (or the caller may not see it)."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ServerInactiveException(TrackerException):
    """Raised when a webhook delivery targets a deactivated server."""

    def __init__(self) -> None:
        super().__init__("Server is not active", "SERVER_INACTIVE")


class SchemaValidationException(TrackerException):
    """Raised when an inbound payload fails schema validation."""

    def __init__(self, schema_type: str, validation_errors: list[Any]) -> None:
        """Initialize with schema type and validation errors.

        Args:
            schema_type: Payload or schema identifier.
            validation_errors: List of {field, message} dicts.
        """
        super().__init__(
            f"Schema validation failed for {schema_type}",
            "SCHEMA_VALIDATION_ERROR",
            {"schema_type": schema_type, "errors": validation_errors},
        )


class DuplicateEmailException(TrackerException):
    """Raised when registering or changing to an email that is already registered."""

    def __init__(self) -> None:
        super().__init__("Email is already registered", "DUPLICATE_EMAIL", {})


class AlreadyMemberException(TrackerException):
    """Raised at the API edge when an admin is added to a server they already belong to."""

    def __init__(self, server_id: str, admin_id: str) -> None:
        super().__init__(
            "Admin is already a member of this server",
            "ALREADY_MEMBER",
            {"server_id": server_id, "admin_id": admin_id},
        )


class InvalidVerificationCodeException(TrackerException):
    """Raised for any failed code confirmation. Wrong and expired codes look the same."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid or expired verification code", "INVALID_VERIFICATION_CODE"
        )


class SqlNotConfiguredException(TrackerException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
