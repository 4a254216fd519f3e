"""Workspace authorization: resolve the caller's role, then guard on permissions."""

from __future__ import annotations

from collections.abc import Iterable

from taskflow.application.dtos.user import MemberRole
from taskflow.application.interfaces.repositories import (
    IMemberRepository,
    IWorkspaceRepository,
)
from taskflow.domain.enums import ROLE_PERMISSIONS, Permission, Role
from taskflow.domain.exceptions import (
    AuthorizationException,
    NotWorkspaceMemberException,
    ResourceNotFoundException,
)


def role_guard(role: Role, required: Iterable[Permission]) -> None:
    """Raise AuthorizationException unless role grants every required permission."""
    granted = ROLE_PERMISSIONS.get(role, frozenset())
    missing = [p.value for p in required if p not in granted]
    if missing:
        raise AuthorizationException(missing_permissions=missing)


class MemberRoleService:
    """Resolves a user's role in a workspace (404 workspace, 403 non-member)."""

    def __init__(
        self,
        workspace_repo: IWorkspaceRepository,
        member_repo: IMemberRepository,
    ) -> None:
        self.workspace_repo = workspace_repo
        self.member_repo = member_repo

    async def get_member_role_in_workspace(
        self, user_id: str, workspace_id: str
    ) -> MemberRole:
        """Return the caller's membership; raise when workspace or membership is missing."""
        if not await self.workspace_repo.exists(workspace_id):
            raise ResourceNotFoundException(
                "workspace", workspace_id, message="Workspace not found"
            )
        role = await self.member_repo.get_role(user_id, workspace_id)
        if role is None:
            raise NotWorkspaceMemberException(workspace_id)
        return MemberRole(user_id=user_id, workspace_id=workspace_id, role=role)

    async def require(
        self, user_id: str, workspace_id: str, *permissions: Permission
    ) -> MemberRole:
        """Resolve the role and apply role_guard in one call."""
        member = await self.get_member_role_in_workspace(user_id, workspace_id)
        role_guard(member.role, permissions)
        return member
