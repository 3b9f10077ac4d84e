"""SQLAlchemy model for bank transactions."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, BigInteger, DateTime, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from finlink.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from finlink.infrastructure.persistence.sqlalchemy.models.banking.bank_account_model import (  # NOQA: E501
        BankAccountModel,
    )


class TransactionModel(Base, TimestampMixin):
    """Database model for transactions posted to a bank account."""

    __tablename__ = "transactions"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    bank_account_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("bank_accounts.id", ondelete="CASCADE"),
        nullable=False,
    )
    external_transaction_id: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
    )

    # Transaction data
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    iso_currency_code: Mapped[Optional[str]] = mapped_column(String(3))
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    pending: Mapped[bool] = mapped_column(default=False, nullable=False)
    category: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    payment_channel: Mapped[Optional[str]] = mapped_column(String(50))
    merchant_name: Mapped[Optional[str]] = mapped_column(String(255))

    # Relationships
    account: Mapped[BankAccountModel] = relationship(
        "BankAccountModel",
        back_populates="transactions",
    )

    __table_args__ = (
        Index("idx_transaction_account_date", "bank_account_id", "date"),
    )

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(id={self.id}, date={self.date}, "
            f"amount={self.amount})>"
        )
