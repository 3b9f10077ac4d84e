"""SQLAlchemy implementation of BankAccountRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from finlink.domain.banking.repositories import BankAccountRepository
from finlink.domain.banking.value_objects import (
    AccountVisibilityPolicy,
    BankAccount,
)
from finlink.infrastructure.persistence.sqlalchemy.models import (
    BankAccountModel,
    BankConnectionModel,
)
from finlink.infrastructure.persistence.sqlalchemy.repositories._utils import (
    connection_visibility_clauses,
)
from finlink.infrastructure.persistence.sqlalchemy.repositories.banking._mapping import (  # NOQA: E501
    map_account,
    map_connection,
)

if TYPE_CHECKING:
    from finlink.application.context import UserContext

logger = logging.getLogger(__name__)


class BankAccountRepositorySQLAlchemy(BankAccountRepository):
    """SQLAlchemy implementation of bank account repository.

    Every statement joins the parent connection so that ownership and
    connection state are read in the same round trip as the account.
    """

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    def _select_with_connection(self):
        return (
            select(BankAccountModel)
            .join(BankAccountModel.bank_connection)
            .options(contains_eager(BankAccountModel.bank_connection))
        )

    async def find_all(
        self,
        policy: AccountVisibilityPolicy,
    ) -> list[BankAccount]:
        stmt = (
            self._select_with_connection()
            .where(
                BankConnectionModel.user_id == self._user_id,
                *connection_visibility_clauses(policy),
            )
            .order_by(BankAccountModel.created_at.desc(), BankAccountModel.id.desc())
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def find_by_id(self, account_id: UUID) -> Optional[BankAccount]:
        stmt = self._select_with_connection().where(
            BankAccountModel.id == account_id,
            *connection_visibility_clauses(AccountVisibilityPolicy()),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            logger.debug("Bank account not found: %s", account_id)
            return None

        return self._map_to_domain(model)

    async def find_by_currency(
        self,
        currency: str,
        policy: AccountVisibilityPolicy,
    ) -> list[BankAccount]:
        stmt = (
            self._select_with_connection()
            .where(
                BankConnectionModel.user_id == self._user_id,
                BankAccountModel.iso_currency_code == currency,
                *connection_visibility_clauses(policy),
            )
            .order_by(BankAccountModel.id)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    def _map_to_domain(self, model: BankAccountModel) -> BankAccount:
        return map_account(model, map_connection(model.bank_connection))
