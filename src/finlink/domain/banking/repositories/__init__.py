"""Repository interfaces for banking domain."""

from finlink.domain.banking.repositories.bank_account_repository import (
    BankAccountRepository,
)
from finlink.domain.banking.repositories.bank_connection_repository import (
    BankConnectionRepository,
)
from finlink.domain.banking.repositories.transaction_repository import (
    TransactionRepository,
)

__all__ = [
    "BankAccountRepository",
    "BankConnectionRepository",
    "TransactionRepository",
]
