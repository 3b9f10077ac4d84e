"""Transaction value object."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Transaction(BaseModel):
    """A posted or pending movement on a bank account.

    ``amount`` is signed and expressed in minor units.
    """

    id: UUID
    bank_account_id: UUID
    external_transaction_id: str = Field(..., max_length=255)
    amount: int
    iso_currency_code: str | None = Field(default=None, max_length=3)
    date: datetime
    name: str
    merchant_name: str | None = None
    pending: bool = False
    category: list[str] = Field(default_factory=list)
    payment_channel: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(frozen=True)
