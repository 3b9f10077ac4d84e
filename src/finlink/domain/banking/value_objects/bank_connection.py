"""Bank connection value object."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from finlink.domain.banking.value_objects.connection_status import ConnectionStatus


class BankConnection(BaseModel):
    """
    Value object representing a user's link to one financial institution.

    The connection is the only place ownership is recorded: accounts and
    transactions reach their user through it.
    """

    id: UUID
    user_id: UUID = Field(..., description="Owning user")
    institution_id: str | None = Field(default=None, max_length=255)
    institution_name: str | None = Field(default=None, max_length=255)
    status: str = Field(default=ConnectionStatus.ACTIVE.value, max_length=50)
    last_synced_at: datetime | None = None
    last_sync_status: str | None = Field(default=None, max_length=50)
    deleted_at: datetime | None = Field(
        default=None,
        description="Soft-delete marker; deleted connections are never read",
    )
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_active(self) -> bool:
        return self.status == ConnectionStatus.ACTIVE.value
