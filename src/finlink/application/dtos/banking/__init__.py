"""Banking DTOs."""

from finlink.application.dtos.banking.bank_account_dto import BankAccountDTO
from finlink.application.dtos.banking.bank_connection_dto import BankConnectionDTO
from finlink.application.dtos.banking.consolidated_balance_dto import (
    ConsolidatedAccountDTO,
    ConsolidatedBalanceDTO,
)
from finlink.application.dtos.banking.transaction_page_dto import (
    TransactionDTO,
    TransactionPageDTO,
)

__all__ = [
    "BankAccountDTO",
    "BankConnectionDTO",
    "ConsolidatedAccountDTO",
    "ConsolidatedBalanceDTO",
    "TransactionDTO",
    "TransactionPageDTO",
]
