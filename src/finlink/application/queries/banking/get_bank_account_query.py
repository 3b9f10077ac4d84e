"""Fetch a single bank account owned by the current user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finlink.application.dtos.banking import BankAccountDTO
from finlink.application.queries.banking._read_scope import read_scope
from finlink.domain.banking.repositories import BankAccountRepository
from finlink.domain.banking.services import AccountAccessService

if TYPE_CHECKING:
    from finlink.application.context import UserContext
    from finlink.application.factories import (
        ReadTransactionProvider,
        RepositoryFactory,
    )


class GetBankAccountQuery:
    """Query to fetch one account after checking ownership."""

    def __init__(
        self,
        bank_account_repository: BankAccountRepository,
        current_user: UserContext,
        read_provider: Optional[ReadTransactionProvider] = None,
    ):
        self._account_repo = bank_account_repository
        self._current_user = current_user
        self._read_provider = read_provider

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetBankAccountQuery:
        return cls(
            bank_account_repository=factory.bank_account_repository(),
            current_user=factory.current_user,
            read_provider=factory,
        )

    async def execute(self, account_id: UUID) -> BankAccountDTO:
        """Return the account.

        Raises
        ------
        BankAccountNotFoundError
            If no such account exists
        BankAccountAccessDeniedError
            If the account belongs to another user
        """
        async with read_scope(self._read_provider):
            account = await self._account_repo.find_by_id(account_id)
            account = AccountAccessService.ensure_access(
                caller_user_id=self._current_user.user_id,
                account_id=account_id,
                account=account,
            )
        return BankAccountDTO.from_domain(account)
