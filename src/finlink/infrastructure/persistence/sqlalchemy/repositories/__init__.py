"""SQLAlchemy repository implementations."""

from finlink.infrastructure.persistence.sqlalchemy.repositories.banking import (
    BankAccountRepositorySQLAlchemy,
    BankConnectionRepositorySQLAlchemy,
    TransactionRepositorySQLAlchemy,
)
from finlink.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from finlink.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "BankAccountRepositorySQLAlchemy",
    "BankConnectionRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "TransactionRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
