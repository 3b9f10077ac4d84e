"""Repository interface for bank connections."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from finlink.domain.banking.value_objects import BankConnectionOverview


class BankConnectionRepository(ABC):
    """Read access to bank connections and their accounts.

    Soft-deleted connections are never returned. Like accounts, only
    ``find_by_id`` ignores the current user.
    """

    @abstractmethod
    async def find_all(self) -> list[BankConnectionOverview]:
        """
        Find all live connections of the current user.

        Returns
        -------
        Connections with their accounts, newest first
        """

    @abstractmethod
    async def find_by_id(self, connection_id: UUID) -> Optional[BankConnectionOverview]:
        """
        Find a live connection by id, regardless of owner.

        Parameters
        ----------
        connection_id
            The connection to look up

        Returns
        -------
        The connection with its accounts, or None
        """
