"""Shared utilities for SQLAlchemy repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from finlink.domain.banking.value_objects import ConnectionStatus
from finlink.infrastructure.persistence.sqlalchemy.models import BankConnectionModel

if TYPE_CHECKING:
    from finlink.domain.banking.value_objects import AccountVisibilityPolicy


def connection_visibility_clauses(policy: AccountVisibilityPolicy) -> list[Any]:
    """SQL predicates on ``BankConnectionModel`` equivalent to ``policy``."""
    clauses: list[Any] = []
    if policy.exclude_deleted_connections:
        clauses.append(BankConnectionModel.deleted_at.is_(None))
    if policy.require_active_connection:
        clauses.append(BankConnectionModel.status == ConnectionStatus.ACTIVE.value)
    return clauses
