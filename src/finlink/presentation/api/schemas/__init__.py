"""API request/response schemas."""

from finlink.presentation.api.schemas.bank_accounts import (
    BankAccountResponse,
    ConsolidatedAccountResponse,
    ConsolidatedBalanceResponse,
    TransactionPageResponse,
    TransactionResponse,
)
from finlink.presentation.api.schemas.bank_connections import BankConnectionResponse
from finlink.presentation.api.schemas.common import (
    CamelModel,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "BankAccountResponse",
    "BankConnectionResponse",
    "CamelModel",
    "ConsolidatedAccountResponse",
    "ConsolidatedBalanceResponse",
    "ErrorResponse",
    "HealthResponse",
    "TransactionPageResponse",
    "TransactionResponse",
]
