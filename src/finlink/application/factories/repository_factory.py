"""Repository factory protocol for application layer."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Any, Protocol

from finlink.domain.banking.repositories import (
    BankAccountRepository,
    BankConnectionRepository,
    TransactionRepository,
)

if TYPE_CHECKING:
    from finlink.application.context import UserContext


class ReadTransactionProvider(Protocol):
    """Anything able to scope a group of reads to one transaction."""

    def read_transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a read transaction, or join the one already in progress.

        All reads issued inside the block observe one consistent snapshot
        where the database supports it. The transaction is released on every
        exit path, exceptions included.
        """
        ...


class RepositoryFactory(ReadTransactionProvider, Protocol):
    """Protocol for creating user-scoped repositories."""

    @property
    def current_user(self) -> UserContext:
        """Get the current user for repository scoping."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        """
        ...

    def bank_account_repository(self) -> BankAccountRepository:
        """Get bank account repository."""
        ...

    def bank_connection_repository(self) -> BankConnectionRepository:
        """Get bank connection repository."""
        ...

    def transaction_repository(self) -> TransactionRepository:
        """Get bank transaction repository."""
        ...
