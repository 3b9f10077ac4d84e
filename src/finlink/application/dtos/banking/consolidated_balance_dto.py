"""DTOs for the consolidated balance query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from finlink.domain.banking.services import ConsolidatedBalance
from finlink.domain.banking.value_objects import BankAccount


@dataclass(frozen=True)
class ConsolidatedAccountDTO:
    """One account contributing to a consolidated balance."""

    id: UUID
    name: str
    mask: Optional[str]
    available_balance: int
    current_balance: int

    @classmethod
    def from_domain(cls, account: BankAccount) -> ConsolidatedAccountDTO:
        return cls(
            id=account.id,
            name=account.name,
            mask=account.mask,
            available_balance=account.available_balance or 0,
            current_balance=account.current_balance or 0,
        )


@dataclass(frozen=True)
class ConsolidatedBalanceDTO:
    """Balance totals across all eligible accounts in one currency."""

    total_available: int
    total_current: int
    currency: str
    account_count: int
    accounts: list[ConsolidatedAccountDTO]

    @classmethod
    def from_domain(cls, balance: ConsolidatedBalance) -> ConsolidatedBalanceDTO:
        return cls(
            total_available=balance.total_available,
            total_current=balance.total_current,
            currency=balance.currency,
            account_count=balance.account_count,
            accounts=[ConsolidatedAccountDTO.from_domain(a) for a in balance.accounts],
        )
