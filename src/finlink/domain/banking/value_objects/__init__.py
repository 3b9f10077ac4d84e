"""Value objects for banking domain."""

from finlink.domain.banking.value_objects.bank_account import BankAccount
from finlink.domain.banking.value_objects.bank_connection import BankConnection
from finlink.domain.banking.value_objects.bank_connection_overview import (
    BankConnectionOverview,
)
from finlink.domain.banking.value_objects.connection_status import ConnectionStatus
from finlink.domain.banking.value_objects.page_request import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PageRequest,
)
from finlink.domain.banking.value_objects.transaction import Transaction
from finlink.domain.banking.value_objects.visibility_policy import (
    AccountVisibilityPolicy,
)

__all__ = [
    "AccountVisibilityPolicy",
    "BankAccount",
    "BankConnection",
    "BankConnectionOverview",
    "ConnectionStatus",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PageRequest",
    "Transaction",
]
