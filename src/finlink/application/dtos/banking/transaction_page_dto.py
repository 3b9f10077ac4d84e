"""DTOs for paginated transaction listings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from finlink.domain.banking.value_objects import Transaction


@dataclass(frozen=True)
class TransactionDTO:
    """Single transaction for presentation layer."""

    id: UUID
    bank_account_id: UUID
    external_transaction_id: str
    amount: int
    iso_currency_code: Optional[str]
    date: datetime
    name: str
    merchant_name: Optional[str]
    pending: bool
    category: list[str]
    payment_channel: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_domain(cls, transaction: Transaction) -> TransactionDTO:
        return cls(
            id=transaction.id,
            bank_account_id=transaction.bank_account_id,
            external_transaction_id=transaction.external_transaction_id,
            amount=transaction.amount,
            iso_currency_code=transaction.iso_currency_code,
            date=transaction.date,
            name=transaction.name,
            merchant_name=transaction.merchant_name,
            pending=transaction.pending,
            category=list(transaction.category),
            payment_channel=transaction.payment_channel,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )


@dataclass(frozen=True)
class TransactionPageDTO:
    """One page of transactions plus pagination metadata.

    ``page`` and ``page_size`` are the values actually applied after
    clamping, not the raw request.
    """

    transactions: list[TransactionDTO]
    total: int
    page: int
    page_size: int
    has_more: bool
