"""Repository interface for bank transactions."""

from abc import ABC, abstractmethod
from uuid import UUID

from finlink.domain.banking.value_objects import Transaction


class TransactionRepository(ABC):
    """Read access to the transactions of a single account."""

    @abstractmethod
    async def find_by_account_id(
        self,
        account_id: UUID,
        limit: int,
        offset: int,
    ) -> list[Transaction]:
        """
        Fetch one window of an account's transactions.

        Parameters
        ----------
        account_id
            Account whose transactions are read
        limit
            Maximum number of rows
        offset
            Rows to skip

        Returns
        -------
        Transactions ordered by date descending, then id descending
        """

    @abstractmethod
    async def count_by_account_id(self, account_id: UUID) -> int:
        """Count all transactions of an account."""
