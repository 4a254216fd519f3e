"""DTOs for users and workspace membership (no dependency on ORM)."""

from dataclasses import dataclass

from taskflow.domain.enums import Role


@dataclass(frozen=True)
class UserResult:
    """User read-model (id, display name, email)."""

    id: str
    name: str
    email: str


@dataclass(frozen=True)
class MemberRole:
    """Caller's membership in a workspace."""

    user_id: str
    workspace_id: str
    role: Role
