"""Bank account and transaction response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from finlink.application.dtos.banking import (
    BankAccountDTO,
    ConsolidatedAccountDTO,
    ConsolidatedBalanceDTO,
    TransactionDTO,
    TransactionPageDTO,
)
from finlink.presentation.api.schemas.common import CamelModel


class BankAccountResponse(CamelModel):
    """A bank account. Balances are integer minor units."""

    id: UUID
    bank_connection_id: UUID
    external_account_id: str
    name: str
    official_name: Optional[str] = None
    type: str
    subtype: Optional[str] = None
    mask: Optional[str] = None
    current_balance: int = Field(..., description="Minor units; unknown reads as 0")
    available_balance: int = Field(..., description="Minor units; unknown reads as 0")
    iso_currency_code: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dto(cls, dto: BankAccountDTO) -> BankAccountResponse:
        return cls(
            id=dto.id,
            bank_connection_id=dto.bank_connection_id,
            external_account_id=dto.external_account_id,
            name=dto.name,
            official_name=dto.official_name,
            type=dto.type,
            subtype=dto.subtype,
            mask=dto.mask,
            current_balance=dto.current_balance,
            available_balance=dto.available_balance,
            iso_currency_code=dto.iso_currency_code,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class ConsolidatedAccountResponse(CamelModel):
    """Per-account line of a consolidated balance."""

    id: UUID
    name: str
    mask: Optional[str] = None
    available_balance: int
    current_balance: int

    @classmethod
    def from_dto(cls, dto: ConsolidatedAccountDTO) -> ConsolidatedAccountResponse:
        return cls(
            id=dto.id,
            name=dto.name,
            mask=dto.mask,
            available_balance=dto.available_balance,
            current_balance=dto.current_balance,
        )


class ConsolidatedBalanceResponse(CamelModel):
    """Balance totals across the user's eligible accounts in one currency."""

    total_available: int
    total_current: int
    currency: str
    account_count: int
    accounts: list[ConsolidatedAccountResponse]

    @classmethod
    def from_dto(cls, dto: ConsolidatedBalanceDTO) -> ConsolidatedBalanceResponse:
        return cls(
            total_available=dto.total_available,
            total_current=dto.total_current,
            currency=dto.currency,
            account_count=dto.account_count,
            accounts=[ConsolidatedAccountResponse.from_dto(a) for a in dto.accounts],
        )


class TransactionResponse(CamelModel):
    """A transaction. ``amount`` is signed, in minor units."""

    id: UUID
    bank_account_id: UUID
    external_transaction_id: str
    amount: int
    iso_currency_code: Optional[str] = None
    date: datetime
    name: str
    merchant_name: Optional[str] = None
    pending: bool
    category: list[str] = Field(default_factory=list)
    payment_channel: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dto(cls, dto: TransactionDTO) -> TransactionResponse:
        return cls(
            id=dto.id,
            bank_account_id=dto.bank_account_id,
            external_transaction_id=dto.external_transaction_id,
            amount=dto.amount,
            iso_currency_code=dto.iso_currency_code,
            date=dto.date,
            name=dto.name,
            merchant_name=dto.merchant_name,
            pending=dto.pending,
            category=dto.category,
            payment_channel=dto.payment_channel,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class TransactionPageResponse(CamelModel):
    """One page of transactions with pagination metadata."""

    transactions: list[TransactionResponse]
    total: int
    page: int
    page_size: int
    has_more: bool

    @classmethod
    def from_dto(cls, dto: TransactionPageDTO) -> TransactionPageResponse:
        return cls(
            transactions=[TransactionResponse.from_dto(t) for t in dto.transactions],
            total=dto.total,
            page=dto.page,
            page_size=dto.page_size,
            has_more=dto.has_more,
        )
