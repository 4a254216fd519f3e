"""Workspace, member and project repositories (authorization and scoping lookups)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.domain.enums import Role
from taskflow.infrastructure.persistence.models.project import Project
from taskflow.infrastructure.persistence.models.workspace import Member, Workspace


class WorkspaceRepository:
    """Implements IWorkspaceRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def exists(self, workspace_id: str) -> bool:
        result = await self.db.execute(
            select(Workspace.id).where(Workspace.id == workspace_id)
        )
        return result.scalar_one_or_none() is not None


class MemberRepository:
    """Implements IMemberRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_role(self, user_id: str, workspace_id: str) -> Role | None:
        """Return the member's role, or None when the user is not in the workspace."""
        result = await self.db.execute(
            select(Member.role).where(
                Member.user_id == user_id,
                Member.workspace_id == workspace_id,
            )
        )
        role = result.scalar_one_or_none()
        return Role(role) if role is not None else None


class ProjectRepository:
    """Implements IProjectRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def exists_in_workspace(self, project_id: str, workspace_id: str) -> bool:
        result = await self.db.execute(
            select(Project.id).where(
                Project.id == project_id,
                Project.workspace_id == workspace_id,
            )
        )
        return result.scalar_one_or_none() is not None
