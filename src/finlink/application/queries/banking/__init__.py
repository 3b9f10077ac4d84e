"""Banking read queries."""

from finlink.application.queries.banking.consolidated_balance_query import (
    ConsolidatedBalanceQuery,
)
from finlink.application.queries.banking.get_bank_account_query import (
    GetBankAccountQuery,
)
from finlink.application.queries.banking.get_bank_connection_query import (
    GetBankConnectionQuery,
)
from finlink.application.queries.banking.list_account_transactions_query import (
    ListAccountTransactionsQuery,
)
from finlink.application.queries.banking.list_bank_accounts_query import (
    ListBankAccountsQuery,
)
from finlink.application.queries.banking.list_bank_connections_query import (
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
