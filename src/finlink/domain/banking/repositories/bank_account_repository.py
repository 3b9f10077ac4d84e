"""Repository interface for bank accounts."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from finlink.domain.banking.value_objects import AccountVisibilityPolicy, BankAccount


class BankAccountRepository(ABC):
    """Read access to bank accounts.

    Implementations are bound to the current user (see ``UserContext``);
    ``find_by_id`` is the one lookup that is not user-scoped, so that a
    missing account and a foreign account can be told apart.
    """

    @abstractmethod
    async def find_all(
        self,
        policy: AccountVisibilityPolicy,
    ) -> list[BankAccount]:
        """
        Find all bank accounts of the current user.

        Parameters
        ----------
        policy
            Connection states that make an account visible

        Returns
        -------
        Accounts ordered by creation time, newest first
        """

    @abstractmethod
    async def find_by_id(self, account_id: UUID) -> Optional[BankAccount]:
        """
        Find a bank account by id, regardless of owner.

        Parameters
        ----------
        account_id
            The account to look up

        Returns
        -------
        Bank account (with its connection) or None if it does not exist
        or its connection has been soft-deleted
        """

    @abstractmethod
    async def find_by_currency(
        self,
        currency: str,
        policy: AccountVisibilityPolicy,
    ) -> list[BankAccount]:
        """
        Find the current user's accounts held in one currency.

        Parameters
        ----------
        currency
            ISO 4217 code, already normalised to upper case
        policy
            Connection states that make an account eligible

        Returns
        -------
        Accounts ordered by id
        """
