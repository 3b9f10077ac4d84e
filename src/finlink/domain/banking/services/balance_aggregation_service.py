"""Consolidated balance over a set of bank accounts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from finlink.domain.banking.value_objects import AccountVisibilityPolicy, BankAccount


@dataclass(frozen=True)
class ConsolidatedBalance:
    """Totals in minor units plus the accounts they were summed from."""

    currency: str
    total_available: int
    total_current: int
    accounts: tuple[BankAccount, ...]

    @property
    def account_count(self) -> int:
        return len(self.accounts)


class BalanceAggregationService:
    """Sums balances of accounts sharing one currency.

    Unknown balances count as zero. Arithmetic stays in integers. When a
    policy is given, accounts whose connection it rejects are left out.
    """

    @staticmethod
    def aggregate(
        accounts: Iterable[BankAccount],
        currency: str,
        policy: Optional[AccountVisibilityPolicy] = None,
    ) -> ConsolidatedBalance:
        matched = tuple(
            sorted(
                (
                    a
                    for a in accounts
                    if a.iso_currency_code == currency
                    and (policy is None or policy.allows(a.connection))
                ),
                key=lambda a: str(a.id),
            ),
        )
        total_available = sum(a.available_balance or 0 for a in matched)
        total_current = sum(a.current_balance or 0 for a in matched)
        return ConsolidatedBalance(
            currency=currency,
            total_available=total_available,
            total_current=total_current,
            accounts=matched,
        )
