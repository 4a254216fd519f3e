"""Project ORM model (workspace-scoped container of tasks)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from taskflow.infrastructure.persistence.database import Base
from taskflow.infrastructure.persistence.models.mixins import WorkspaceScopedModel


class Project(WorkspaceScopedModel, Base):
    """Project. Table: project."""

    __tablename__ = "project"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    emoji: Mapped[str | None] = mapped_column(String(16), nullable=True)
