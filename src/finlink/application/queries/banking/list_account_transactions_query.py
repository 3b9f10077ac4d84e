"""Paginated transactions of one bank account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finlink.application.dtos.banking import TransactionDTO, TransactionPageDTO
from finlink.application.queries.banking._read_scope import read_scope
from finlink.domain.banking.repositories import (
    BankAccountRepository,
    TransactionRepository,
)
from finlink.domain.banking.services import AccountAccessService
from finlink.domain.banking.value_objects import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PageRequest,
)

if TYPE_CHECKING:
    from finlink.application.context import UserContext
    from finlink.application.factories import (
        ReadTransactionProvider,
        RepositoryFactory,
    )

logger = logging.getLogger(__name__)


class ListAccountTransactionsQuery:
    """Query returning one page of an account's transactions, newest first."""

    def __init__(  # NOQA: PLR0913
        self,
        bank_account_repository: BankAccountRepository,
        transaction_repository: TransactionRepository,
        current_user: UserContext,
        read_provider: Optional[ReadTransactionProvider] = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        self._account_repo = bank_account_repository
        self._transaction_repo = transaction_repository
        self._current_user = current_user
        self._read_provider = read_provider
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> ListAccountTransactionsQuery:
        return cls(
            bank_account_repository=factory.bank_account_repository(),
            transaction_repository=factory.transaction_repository(),
            current_user=factory.current_user,
            read_provider=factory,
            default_page_size=default_page_size,
            max_page_size=max_page_size,
        )

    async def execute(
        self,
        account_id: UUID,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> TransactionPageDTO:
        """Return one page of transactions.

        Parameters
        ----------
        account_id
            Account to read
        page
            1-based page, clamped to at least 1
        page_size
            Rows per page, clamped into [1, max_page_size]

        Returns
        -------
        TransactionPageDTO carrying the applied page and page size

        Raises
        ------
        BankAccountNotFoundError
            If no such account exists
        BankAccountAccessDeniedError
            If the account belongs to another user
        """
        window = PageRequest.sanitized(
            page=page,
            page_size=page_size,
            default_page_size=self._default_page_size,
            max_page_size=self._max_page_size,
        )

        async with read_scope(self._read_provider):
            account = await self._account_repo.find_by_id(account_id)
            AccountAccessService.ensure_access(
                caller_user_id=self._current_user.user_id,
                account_id=account_id,
                account=account,
            )
            transactions = await self._transaction_repo.find_by_account_id(
                account_id,
                limit=window.limit,
                offset=window.offset,
            )
            total = await self._transaction_repo.count_by_account_id(account_id)

        logger.debug(
            "Account %s transactions page=%d size=%d total=%d",
            account_id,
            window.page,
            window.page_size,
            total,
        )
        return TransactionPageDTO(
            transactions=[TransactionDTO.from_domain(t) for t in transactions],
            total=total,
            page=window.page,
            page_size=window.page_size,
            has_more=window.has_more(total),
        )
