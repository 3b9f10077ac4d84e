"""List the current user's bank accounts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from finlink.application.dtos.banking import BankAccountDTO
from finlink.application.queries.banking._read_scope import read_scope
from finlink.domain.banking.repositories import BankAccountRepository
from finlink.domain.banking.value_objects import AccountVisibilityPolicy

if TYPE_CHECKING:
    from finlink.application.factories import (
        ReadTransactionProvider,
        RepositoryFactory,
    )

logger = logging.getLogger(__name__)


class ListBankAccountsQuery:
    """Query to list all accounts under the user's live connections."""

    def __init__(
        self,
        bank_account_repository: BankAccountRepository,
        read_provider: Optional[ReadTransactionProvider] = None,
        policy: Optional[AccountVisibilityPolicy] = None,
    ):
        self._account_repo = bank_account_repository
        self._read_provider = read_provider
        self._policy = policy or AccountVisibilityPolicy.for_listing()

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        require_active_connection: bool = False,
    ) -> ListBankAccountsQuery:
        return cls(
            bank_account_repository=factory.bank_account_repository(),
            read_provider=factory,
            policy=AccountVisibilityPolicy.for_listing(
                require_active_connection=require_active_connection,
            ),
        )

    async def execute(self) -> list[BankAccountDTO]:
        async with read_scope(self._read_provider):
            accounts = await self._account_repo.find_all(self._policy)
        logger.debug("Listed %d bank accounts", len(accounts))
        return [BankAccountDTO.from_domain(a) for a in accounts]
