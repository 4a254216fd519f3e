"""User repository (read-only lookups for assignee resolution)."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.application.dtos.user import UserResult
from taskflow.infrastructure.persistence.models.user import User


class UserRepository:
    """User repository. Implements IUserRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await self.db.get(User, user_id)
        if user is None:
            return None
        return UserResult(id=user.id, name=user.name, email=user.email)
