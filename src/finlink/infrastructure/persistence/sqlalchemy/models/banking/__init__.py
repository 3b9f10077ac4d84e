"""Banking persistence models."""

from finlink.infrastructure.persistence.sqlalchemy.models.banking.bank_account_model import (  # NOQA: E501
    BankAccountModel,
)
from finlink.infrastructure.persistence.sqlalchemy.models.banking.bank_connection_model import (  # NOQA: E501
    BankConnectionModel,
)
from finlink.infrastructure.persistence.sqlalchemy.models.banking.transaction_model import (  # NOQA: E501
    TransactionModel,
)

__all__ = [
    "BankAccountModel",
    "BankConnectionModel",
    "TransactionModel",
]
