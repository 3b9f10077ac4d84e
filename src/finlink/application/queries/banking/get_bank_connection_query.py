"""Fetch a single bank connection owned by the current user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finlink.application.dtos.banking import BankConnectionDTO
from finlink.application.queries.banking._read_scope import read_scope
from finlink.domain.banking.repositories import BankConnectionRepository
from finlink.domain.banking.services import AccountAccessService

if TYPE_CHECKING:
    from finlink.application.context import UserContext
    from finlink.application.factories import (
        ReadTransactionProvider,
        RepositoryFactory,
    )


class GetBankConnectionQuery:
    """Query to fetch one connection after checking ownership."""

    def __init__(
        self,
        bank_connection_repository: BankConnectionRepository,
        current_user: UserContext,
        read_provider: Optional[ReadTransactionProvider] = None,
    ):
        self._connection_repo = bank_connection_repository
        self._current_user = current_user
        self._read_provider = read_provider

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetBankConnectionQuery:
        return cls(
            bank_connection_repository=factory.bank_connection_repository(),
            current_user=factory.current_user,
            read_provider=factory,
        )

    async def execute(self, connection_id: UUID) -> BankConnectionDTO:
        """Return the connection with its accounts.

        Raises
        ------
        BankConnectionNotFoundError
            If the connection does not exist or was deleted
        BankConnectionAccessDeniedError
            If the connection belongs to another user
        """
        async with read_scope(self._read_provider):
            connection = await self._connection_repo.find_by_id(connection_id)
            connection = AccountAccessService.ensure_connection_access(
                caller_user_id=self._current_user.user_id,
                connection_id=connection_id,
                connection=connection,
            )
        return BankConnectionDTO.from_domain(connection)
