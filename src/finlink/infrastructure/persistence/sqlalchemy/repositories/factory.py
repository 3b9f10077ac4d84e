"""SQLAlchemy repository factory for creating user-scoped repositories."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from finlink.infrastructure.persistence.sqlalchemy.repositories.banking import (
    BankAccountRepositorySQLAlchemy,
    BankConnectionRepositorySQLAlchemy,
    TransactionRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from finlink.application.context import UserContext

logger = logging.getLogger(__name__)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(
        self,
        session: AsyncSession,
        user_context: UserContext,
        read_isolation_level: Optional[str] = None,
    ):
        self._session = session
        self._user_context = user_context
        self._read_isolation_level = read_isolation_level

        # Cached instances (created on demand)
        self._bank_account_repo: BankAccountRepositorySQLAlchemy | None = None
        self._bank_connection_repo: BankConnectionRepositorySQLAlchemy | None = None
        self._transaction_repo: TransactionRepositorySQLAlchemy | None = None

    @property
    def current_user(self) -> UserContext:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def bank_account_repository(self) -> BankAccountRepositorySQLAlchemy:
        if self._bank_account_repo is None:
            self._bank_account_repo = BankAccountRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._bank_account_repo

    def bank_connection_repository(self) -> BankConnectionRepositorySQLAlchemy:
        if self._bank_connection_repo is None:
            self._bank_connection_repo = BankConnectionRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._bank_connection_repo

    def transaction_repository(self) -> TransactionRepositorySQLAlchemy:
        if self._transaction_repo is None:
            self._transaction_repo = TransactionRepositorySQLAlchemy(self._session)
        return self._transaction_repo

    @asynccontextmanager
    async def read_transaction(self) -> AsyncIterator[None]:
        """Run the enclosed reads in one transaction.

        Joins the session's transaction if one is already open (the
        isolation level is then left as is). Otherwise begins one, pins the
        configured isolation level on its connection before the first
        statement, and ends it when the block exits.
        """
        if self._session.in_transaction():
            yield
            return

        try:
            async with self._session.begin():
                if self._read_isolation_level:
                    await self._session.connection(
                        execution_options={
                            "isolation_level": self._read_isolation_level,
                        },
                    )
                yield
        except SQLAlchemyError:
            logger.exception("Read transaction failed")
            raise
