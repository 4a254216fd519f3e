"""Task ORM model. Belongs to a project in a workspace; optionally assigned to a user."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskflow.domain.enums import TaskPriority, TaskStatus
from taskflow.infrastructure.persistence.database import Base
from taskflow.infrastructure.persistence.models.mixins import WorkspaceScopedModel


class Task(WorkspaceScopedModel, Base):
    """Task. Table: task."""

    __tablename__ = "task"

    task_code: Mapped[str] = mapped_column(String(32), nullable=False)
    project_id: Mapped[str] = mapped_column(
        String, ForeignKey("project.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=TaskStatus.TODO.value
    )
    priority: Mapped[str] = mapped_column(
        String(32), nullable=False, default=TaskPriority.MEDIUM.value
    )
    assigned_to: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    created_by: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index("ix_task_workspace_project", "workspace_id", "project_id"),
        Index("ix_task_workspace_created", "workspace_id", "created_at"),
    )
