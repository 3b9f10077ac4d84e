"""Query layer. Read-only operations for retrieving data."""

from finlink.application.queries.banking import (
    ConsolidatedBalanceQuery,
    GetBankAccountQuery,
    GetBankConnectionQuery,
    ListAccountTransactionsQuery,
    ListBankAccountsQuery,
    ListBankConnectionsQuery,
)

__all__ = [
    "ConsolidatedBalanceQuery",
    "GetBankAccountQuery",
    "GetBankConnectionQuery",
    "ListAccountTransactionsQuery",
    "ListBankAccountsQuery",
    "ListBankConnectionsQuery",
]
