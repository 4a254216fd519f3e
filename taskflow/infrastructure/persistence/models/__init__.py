"""ORM models. Importing this package registers every table on Base.metadata."""

from taskflow.infrastructure.persistence.models.notification_outbox import (
    NotificationOutbox,
)
from taskflow.infrastructure.persistence.models.project import Project
from taskflow.infrastructure.persistence.models.task import Task
from taskflow.infrastructure.persistence.models.user import User
from taskflow.infrastructure.persistence.models.workspace import Member, Workspace

__all__ = [
    "Member",
    "NotificationOutbox",
    "Project",
    "Task",
    "User",
    "Workspace",
]
