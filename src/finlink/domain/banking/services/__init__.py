"""Domain services for banking reads."""

from finlink.domain.banking.services.account_access_service import (
    AccessDecision,
    AccountAccessService,
)
from finlink.domain.banking.services.balance_aggregation_service import (
    BalanceAggregationService,
    ConsolidatedBalance,
)

__all__ = [
    "AccessDecision",
    "AccountAccessService",
    "BalanceAggregationService",
    "ConsolidatedBalance",
]
