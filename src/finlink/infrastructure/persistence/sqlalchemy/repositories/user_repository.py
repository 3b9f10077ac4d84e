"""SQLAlchemy lookups on the users table."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from finlink.infrastructure.persistence.sqlalchemy.models import UserModel


class UserRepositorySQLAlchemy:
    """Read-only access to user rows, used to validate token subjects."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def exists(self, user_id: UUID) -> bool:
        stmt = select(UserModel.id).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None
