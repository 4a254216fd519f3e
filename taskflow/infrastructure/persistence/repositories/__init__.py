"""Persistence repositories. Re-exports for dependency injection."""

from taskflow.infrastructure.persistence.repositories.notification_outbox_repo import (
    NotificationOutboxRepository,
)
from taskflow.infrastructure.persistence.repositories.task_repo import TaskRepository
from taskflow.infrastructure.persistence.repositories.user_repo import UserRepository
from taskflow.infrastructure.persistence.repositories.workspace_repo import (
    MemberRepository,
    ProjectRepository,
    WorkspaceRepository,
)

__all__ = [
    "MemberRepository",
    "NotificationOutboxRepository",
    "ProjectRepository",
    "TaskRepository",
    "UserRepository",
    "WorkspaceRepository",
]
