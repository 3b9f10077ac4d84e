"""DTOs for bank connection query results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from finlink.application.dtos.banking.bank_account_dto import BankAccountDTO
from finlink.domain.banking.value_objects import BankConnectionOverview


@dataclass(frozen=True)
class BankConnectionDTO:
    """Bank connection with the accounts linked through it."""

    id: UUID
    institution_id: Optional[str]
    institution_name: Optional[str]
    status: str
    last_synced_at: Optional[datetime]
    last_sync_status: Optional[str]
    created_at: Optional[datetime]
    accounts: list[BankAccountDTO]

    @classmethod
    def from_domain(cls, overview: BankConnectionOverview) -> BankConnectionDTO:
        connection = overview.connection
        return cls(
            id=connection.id,
            institution_id=connection.institution_id,
            institution_name=connection.institution_name,
            status=connection.status,
            last_synced_at=connection.last_synced_at,
            last_sync_status=connection.last_sync_status,
            created_at=connection.created_at,
            accounts=[BankAccountDTO.from_domain(a) for a in overview.accounts],
        )
