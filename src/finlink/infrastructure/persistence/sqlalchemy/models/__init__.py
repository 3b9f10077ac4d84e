"""SQLAlchemy models for persistence layer."""

from finlink.infrastructure.persistence.sqlalchemy.models.banking import (
    BankAccountModel,
    BankConnectionModel,
    TransactionModel,
)
from finlink.infrastructure.persistence.sqlalchemy.models.base import Base
from finlink.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "BankAccountModel",
    "BankConnectionModel",
    "TransactionModel",
    "UserModel",
]
