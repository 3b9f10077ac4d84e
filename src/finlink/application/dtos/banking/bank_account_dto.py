"""DTOs for bank account query results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from finlink.domain.banking.value_objects import BankAccount


@dataclass(frozen=True)
class BankAccountDTO:
    """Bank account as shown to its owner. Unknown balances read as 0."""

    id: UUID
    bank_connection_id: UUID
    external_account_id: str
    name: str
    official_name: Optional[str]
    type: str
    subtype: Optional[str]
    mask: Optional[str]
    current_balance: int
    available_balance: int
    iso_currency_code: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_domain(cls, account: BankAccount) -> BankAccountDTO:
        return cls(
            id=account.id,
            bank_connection_id=account.bank_connection_id,
            external_account_id=account.external_account_id,
            name=account.name,
            official_name=account.official_name,
            type=account.type,
            subtype=account.subtype,
            mask=account.mask,
            current_balance=account.current_balance or 0,
            available_balance=account.available_balance or 0,
            iso_currency_code=account.iso_currency_code,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
