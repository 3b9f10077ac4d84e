"""SQLAlchemy repositories for the banking domain."""

from finlink.infrastructure.persistence.sqlalchemy.repositories.banking.bank_account_repository import (  # NOQA: E501
    BankAccountRepositorySQLAlchemy,
)
from finlink.infrastructure.persistence.sqlalchemy.repositories.banking.bank_connection_repository import (  # NOQA: E501
    BankConnectionRepositorySQLAlchemy,
)
from finlink.infrastructure.persistence.sqlalchemy.repositories.banking.transaction_repository import (  # NOQA: E501
    TransactionRepositorySQLAlchemy,
)

__all__ = [
    "BankAccountRepositorySQLAlchemy",
    "BankConnectionRepositorySQLAlchemy",
    "TransactionRepositorySQLAlchemy",
]
