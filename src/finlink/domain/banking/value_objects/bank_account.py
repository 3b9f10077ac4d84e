"""Bank account value object."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from finlink.domain.banking.value_objects.bank_connection import BankConnection


class BankAccount(BaseModel):
    """
    Value object representing one account under a bank connection.

    Balances are integer minor units (cents) and may be unknown.
    """

    # Core identification
    id: UUID
    bank_connection_id: UUID
    external_account_id: str = Field(
        ...,
        max_length=255,
        description="Account id assigned by the data provider",
    )

    # Descriptive fields
    name: str = Field(..., max_length=255)
    official_name: str | None = Field(default=None, max_length=255)
    type: str = Field(..., max_length=50, description="e.g. 'depository', 'credit'")
    subtype: str | None = Field(default=None, max_length=50)
    mask: str | None = Field(default=None, max_length=10, description="Last digits")

    # Balances (minor units)
    current_balance: int | None = None
    available_balance: int | None = None
    iso_currency_code: str = Field(default="USD", max_length=3)

    created_at: datetime | None = None
    updated_at: datetime | None = None

    # Parent connection, needed to resolve the owner
    connection: BankConnection

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @property
    def owner_id(self) -> UUID:
        """User that owns this account through its connection."""
        return self.connection.user_id
