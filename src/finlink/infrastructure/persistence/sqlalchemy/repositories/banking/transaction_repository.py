"""SQLAlchemy implementation of TransactionRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from finlink.domain.banking.repositories import TransactionRepository
from finlink.domain.banking.value_objects import Transaction
from finlink.domain.shared.time import ensure_tz_aware
from finlink.infrastructure.persistence.sqlalchemy.models import TransactionModel


class TransactionRepositorySQLAlchemy(TransactionRepository):
    """SQLAlchemy implementation of transaction repository.

    Not user-scoped: callers check account ownership first.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_account_id(
        self,
        account_id: UUID,
        limit: int,
        offset: int,
    ) -> list[Transaction]:
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.bank_account_id == account_id)
            .order_by(TransactionModel.date.desc(), TransactionModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def count_by_account_id(self, account_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(TransactionModel)
            .where(TransactionModel.bank_account_id == account_id)
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    @staticmethod
    def _map_to_domain(model: TransactionModel) -> Transaction:
        return Transaction(
            id=model.id,
            bank_account_id=model.bank_account_id,
            external_transaction_id=model.external_transaction_id,
            amount=model.amount,
            iso_currency_code=model.iso_currency_code,
            date=ensure_tz_aware(model.date),
            name=model.name,
            merchant_name=model.merchant_name,
            pending=model.pending,
            category=list(model.category or []),
            payment_channel=model.payment_channel,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
