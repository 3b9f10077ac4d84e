"""SQLAlchemy implementation of BankConnectionRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from finlink.domain.banking.repositories import BankConnectionRepository
from finlink.domain.banking.value_objects import BankConnectionOverview
from finlink.domain.shared.time import ensure_tz_aware
from finlink.infrastructure.persistence.sqlalchemy.models import BankConnectionModel
from finlink.infrastructure.persistence.sqlalchemy.repositories.banking._mapping import (  # NOQA: E501
    map_account,
    map_connection,
)

if TYPE_CHECKING:
    from finlink.application.context import UserContext

logger = logging.getLogger(__name__)


class BankConnectionRepositorySQLAlchemy(BankConnectionRepository):
    """SQLAlchemy implementation of bank connection repository.

    Accounts are loaded with one extra SELECT per statement and returned
    newest first, the same order the account listing uses.
    """

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    def _select_live(self):
        return (
            select(BankConnectionModel)
            .where(BankConnectionModel.deleted_at.is_(None))
            .options(selectinload(BankConnectionModel.accounts))
        )

    async def find_all(self) -> list[BankConnectionOverview]:
        stmt = (
            self._select_live()
            .where(BankConnectionModel.user_id == self._user_id)
            .order_by(
                BankConnectionModel.created_at.desc(),
                BankConnectionModel.id.desc(),
            )
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def find_by_id(
        self,
        connection_id: UUID,
    ) -> Optional[BankConnectionOverview]:
        stmt = self._select_live().where(BankConnectionModel.id == connection_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            logger.debug("Bank connection not found: %s", connection_id)
            return None

        return self._map_to_domain(model)

    @staticmethod
    def _map_to_domain(model: BankConnectionModel) -> BankConnectionOverview:
        connection = map_connection(model)
        accounts = sorted(
            model.accounts,
            key=lambda a: (ensure_tz_aware(a.created_at), a.id),
            reverse=True,
        )
        return BankConnectionOverview(
            connection=connection,
            accounts=tuple(map_account(a, connection) for a in accounts),
        )
