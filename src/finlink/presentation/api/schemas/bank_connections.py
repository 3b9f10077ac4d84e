"""Bank connection response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from finlink.application.dtos.banking import BankConnectionDTO
from finlink.presentation.api.schemas.bank_accounts import BankAccountResponse
from finlink.presentation.api.schemas.common import CamelModel


class BankConnectionResponse(CamelModel):
    """A link to one institution with the accounts reached through it."""

    id: UUID
    institution_id: Optional[str] = None
    institution_name: Optional[str] = None
    status: str
    last_synced_at: Optional[datetime] = None
    last_sync_status: Optional[str] = None
    created_at: Optional[datetime] = None
    accounts: list[BankAccountResponse]

    @classmethod
    def from_dto(cls, dto: BankConnectionDTO) -> BankConnectionResponse:
        return cls(
            id=dto.id,
            institution_id=dto.institution_id,
            institution_name=dto.institution_name,
            status=dto.status,
            last_synced_at=dto.last_synced_at,
            last_sync_status=dto.last_sync_status,
            created_at=dto.created_at,
            accounts=[BankAccountResponse.from_dto(a) for a in dto.accounts],
        )
