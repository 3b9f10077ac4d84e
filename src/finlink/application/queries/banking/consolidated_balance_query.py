"""Consolidated balance across the current user's accounts in one currency."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from finlink.application.dtos.banking import ConsolidatedBalanceDTO
from finlink.application.queries.banking._read_scope import read_scope
from finlink.domain.banking.repositories import BankAccountRepository
from finlink.domain.banking.services import BalanceAggregationService
from finlink.domain.banking.value_objects import AccountVisibilityPolicy

if TYPE_CHECKING:
    from finlink.application.factories import (
        ReadTransactionProvider,
        RepositoryFactory,
    )

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "USD"


class ConsolidatedBalanceQuery:
    """Sum available and current balances of all eligible accounts.

    Eligibility is decided by the repository's selection: the account is held
    in the requested currency and its connection belongs to the current user
    and passes the consolidation policy (not soft-deleted, ACTIVE by default).
    """

    def __init__(
        self,
        bank_account_repository: BankAccountRepository,
        read_provider: Optional[ReadTransactionProvider] = None,
        policy: Optional[AccountVisibilityPolicy] = None,
        default_currency: str = DEFAULT_CURRENCY,
    ):
        self._account_repo = bank_account_repository
        self._read_provider = read_provider
        self._policy = policy or AccountVisibilityPolicy.for_consolidation()
        self._default_currency = default_currency

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        require_active_connection: bool = True,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> ConsolidatedBalanceQuery:
        return cls(
            bank_account_repository=factory.bank_account_repository(),
            read_provider=factory,
            policy=AccountVisibilityPolicy.for_consolidation(
                require_active_connection=require_active_connection,
            ),
            default_currency=default_currency,
        )

    def _normalize_currency(self, currency: Optional[str]) -> str:
        code = (currency or "").strip().upper()
        return code or self._default_currency

    async def execute(self, currency: Optional[str] = None) -> ConsolidatedBalanceDTO:
        """Consolidate balances in ``currency``.

        The code is stripped and upper-cased; a missing or blank value falls
        back to the default currency.
        """
        code = self._normalize_currency(currency)
        async with read_scope(self._read_provider):
            accounts = await self._account_repo.find_by_currency(code, self._policy)

        balance = BalanceAggregationService.aggregate(accounts, code, self._policy)
        logger.debug(
            "Consolidated %d %s accounts: available=%d current=%d",
            balance.account_count,
            code,
            balance.total_available,
            balance.total_current,
        )
        return ConsolidatedBalanceDTO.from_domain(balance)
