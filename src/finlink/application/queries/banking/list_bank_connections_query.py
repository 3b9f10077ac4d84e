"""List the current user's bank connections."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from finlink.application.dtos.banking import BankConnectionDTO
from finlink.application.queries.banking._read_scope import read_scope
from finlink.domain.banking.repositories import BankConnectionRepository

if TYPE_CHECKING:
    from finlink.application.factories import (
        ReadTransactionProvider,
        RepositoryFactory,
    )

logger = logging.getLogger(__name__)


class ListBankConnectionsQuery:
    """Query to list live connections, newest first, with their accounts."""

    def __init__(
        self,
        bank_connection_repository: BankConnectionRepository,
        read_provider: Optional[ReadTransactionProvider] = None,
    ):
        self._connection_repo = bank_connection_repository
        self._read_provider = read_provider

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListBankConnectionsQuery:
        return cls(
            bank_connection_repository=factory.bank_connection_repository(),
            read_provider=factory,
        )

    async def execute(self) -> list[BankConnectionDTO]:
        async with read_scope(self._read_provider):
            connections = await self._connection_repo.find_all()
        logger.debug("Listed %d bank connections", len(connections))
        return [BankConnectionDTO.from_domain(c) for c in connections]
