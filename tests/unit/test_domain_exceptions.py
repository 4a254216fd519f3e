"""Tests for domain exceptions (error_code, message, details, to_dict)."""

from taskflow.domain.exceptions import (
    AssigneeNotFoundException,
    AssigneeNotMemberException,
    AuthenticationException,
    AuthorizationException,
    EmailDeliveryException,
    NotWorkspaceMemberException,
    ResourceNotFoundException,
    TaskflowException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """TaskflowException uses class name as error_code when not provided."""
    exc = TaskflowException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TaskflowException"
    assert exc.details == {}


def test_to_dict_shape() -> None:
    exc = TaskflowException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception_field() -> None:
    exc = ValidationException("Invalid format", field="dueDate")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "dueDate"}


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.error_code == "AUTHENTICATION_ERROR"
    assert exc.message == "Authentication failed"


def test_authorization_exception_lists_missing_permissions() -> None:
    exc = AuthorizationException(missing_permissions=["DELETE_TASK"])
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.message == (
        "You do not have the necessary permissions to perform this action"
    )
    assert exc.details == {"missing_permissions": ["DELETE_TASK"]}


def test_not_workspace_member() -> None:
    exc = NotWorkspaceMemberException("ws-1")
    assert exc.error_code == "NOT_WORKSPACE_MEMBER"
    assert exc.details == {"workspace_id": "ws-1"}


def test_resource_not_found_message_override() -> None:
    default = ResourceNotFoundException("task", "t-1")
    assert default.error_code == "RESOURCE_NOT_FOUND"
    assert "t-1" in default.message
    custom = ResourceNotFoundException("task", "t-1", message="Task not found")
    assert custom.message == "Task not found"


def test_assignee_exceptions() -> None:
    missing = AssigneeNotFoundException("u-9")
    assert missing.message == "Assigned user not found."
    assert missing.error_code == "ASSIGNEE_NOT_FOUND"
    outsider = AssigneeNotMemberException("u-9", "ws-1")
    assert outsider.error_code == "ASSIGNEE_NOT_MEMBER"
    assert outsider.details == {"user_id": "u-9", "workspace_id": "ws-1"}


def test_email_delivery_exception() -> None:
    exc = EmailDeliveryException("rate limited", status_code=429)
    assert exc.error_code == "EMAIL_DELIVERY_ERROR"
    assert exc.message == "Email delivery failed: rate limited"
    assert exc.details["status_code"] == 429
