"""Presentation-layer dependency injection (composition root).

Routes depend only on these providers, never on repositories or clients directly.
"""

from .auth import get_current_user_id
from .tasks import (
    get_create_task_use_case,
    get_email_client,
    get_email_renderer,
    get_notification_service,
    get_task_filters,
    get_task_pagination,
    get_task_service,
    get_task_service_for_write,
    positive_int_or_default,
    split_csv,
)
from .workspace import get_member_role_service, require_workspace_permission

__all__ = [
    "get_create_task_use_case",
    "get_current_user_id",
    "get_email_client",
    "get_email_renderer",
    "get_member_role_service",
    "get_notification_service",
    "get_task_filters",
    "get_task_pagination",
    "get_task_service",
    "get_task_service_for_write",
    "positive_int_or_default",
    "require_workspace_permission",
    "split_csv",
]
