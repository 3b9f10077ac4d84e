"""A bank connection together with the accounts linked through it."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from finlink.domain.banking.value_objects.bank_account import BankAccount
from finlink.domain.banking.value_objects.bank_connection import BankConnection


class BankConnectionOverview(BaseModel):
    """Read model for the connection endpoints.

    Every account carries ``connection`` as its parent.
    """

    connection: BankConnection
    accounts: tuple[BankAccount, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def id(self) -> UUID:
        return self.connection.id

    @property
    def owner_id(self) -> UUID:
        return self.connection.user_id
