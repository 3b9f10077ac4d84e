"""Which connection states make an account visible to a read."""

from __future__ import annotations

from dataclasses import dataclass

from finlink.domain.banking.value_objects.bank_connection import BankConnection


@dataclass(frozen=True)
class AccountVisibilityPolicy:
    """Filter applied to the parent connection of every account read.

    Attributes
    ----------
    exclude_deleted_connections
        Hide accounts whose connection carries a soft-delete marker
    require_active_connection
        Hide accounts whose connection status is not ACTIVE
    """

    exclude_deleted_connections: bool = True
    require_active_connection: bool = False

    @classmethod
    def for_listing(cls, require_active_connection: bool = False) -> AccountVisibilityPolicy:
        return cls(require_active_connection=require_active_connection)

    @classmethod
    def for_consolidation(
        cls,
        require_active_connection: bool = True,
    ) -> AccountVisibilityPolicy:
        return cls(require_active_connection=require_active_connection)

    def allows(self, connection: BankConnection) -> bool:
        if self.exclude_deleted_connections and connection.is_deleted:
            return False
        if self.require_active_connection and not connection.is_active:
            return False
        return True
