"""Workspace membership and permission dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.user import MemberRole
from taskflow.application.services.authorization_service import MemberRoleService
from taskflow.domain.enums import Permission
from taskflow.infrastructure.persistence.database import get_db
from taskflow.infrastructure.persistence.repositories import (
    MemberRepository,
    WorkspaceRepository,
)

from .auth import get_current_user_id


async def get_member_role_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberRoleService:
    """Role lookup service (read-only session)."""
    return MemberRoleService(WorkspaceRepository(db), MemberRepository(db))


def require_workspace_permission(*permissions: Permission):
    """Dependency factory: caller must be a workspace member whose role grants permissions."""

    async def _require(
        workspace_id: Annotated[str, Path(min_length=1, max_length=64)],
        user_id: Annotated[str, Depends(get_current_user_id)],
        role_svc: Annotated[MemberRoleService, Depends(get_member_role_service)],
    ) -> MemberRole:
        return await role_svc.require(user_id, workspace_id, *permissions)

    return _require
