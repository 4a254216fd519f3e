"""Domain exceptions for the taskflow application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TaskflowException(Exception):
    """Base exception for all taskflow application errors.

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
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskflowException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(TaskflowException):
    """Raised when the caller identity is missing or cannot be verified."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(TaskflowException):
    """Raised when the caller's workspace role lacks a required permission."""

    def __init__(
        self,
        message: str = "You do not have the necessary permissions to perform this action",
        missing_permissions: list[str] | None = None,
    ) -> None:
        """Initialize with message and the permissions the role lacks.

        Args:
            message: Human-readable message.
            missing_permissions: Permission codes required but not granted.
        """
        details: dict[str, Any] = {}
        if missing_permissions:
            details["missing_permissions"] = missing_permissions
        super().__init__(message, "PERMISSION_DENIED", details)


class NotWorkspaceMemberException(TaskflowException):
    """Raised when the caller has no membership (and so no role) in the workspace."""

    def __init__(self, workspace_id: str) -> None:
        super().__init__(
            "You are not a member of this workspace",
            "NOT_WORKSPACE_MEMBER",
            {"workspace_id": workspace_id},
        )


class ResourceNotFoundException(TaskflowException):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        message: str | None = None,
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task', 'project').
            resource_id: The ID that was not found.
            message: Optional message overriding the default '<type> not found: <id>'.
        """
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class AssigneeNotFoundException(TaskflowException):
    """Raised when a task's assignedTo does not resolve to a user."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            "Assigned user not found.",
            "ASSIGNEE_NOT_FOUND",
            {"user_id": user_id},
        )


class AssigneeNotMemberException(TaskflowException):
    """Raised when a task is assigned to a user outside the workspace."""

    def __init__(self, user_id: str, workspace_id: str) -> None:
        super().__init__(
            "Assigned user is not a member of this workspace.",
            "ASSIGNEE_NOT_MEMBER",
            {"user_id": user_id, "workspace_id": workspace_id},
        )


class EmailDeliveryException(TaskflowException):
    """Raised by an email client when the provider rejects or fails a send."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        details: dict[str, Any] = {"reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"Email delivery failed: {reason}",
            "EMAIL_DELIVERY_ERROR",
            details,
        )


class SqlNotConfiguredException(TaskflowException):
    """Raised when an operation requires the database but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
