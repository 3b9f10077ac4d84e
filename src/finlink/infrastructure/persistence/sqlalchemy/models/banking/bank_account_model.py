"""SQLAlchemy model for bank accounts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlalchemy import BigInteger, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from finlink.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from finlink.infrastructure.persistence.sqlalchemy.models.banking.bank_connection_model import (  # NOQA: E501
        BankConnectionModel,
    )
    from finlink.infrastructure.persistence.sqlalchemy.models.banking.transaction_model import (  # NOQA: E501
        TransactionModel,
    )


class BankAccountModel(Base, TimestampMixin):
    """Database model for bank accounts.

    There is no user column: the owner is reached through
    ``bank_connection``.
    """

    __tablename__ = "bank_accounts"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Connection association
    bank_connection_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("bank_connections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Account identification
    external_account_id: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    official_name: Mapped[Optional[str]] = mapped_column(String(255))
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    subtype: Mapped[Optional[str]] = mapped_column(String(50))
    mask: Mapped[Optional[str]] = mapped_column(String(10))

    # Balance information (minor units)
    current_balance: Mapped[Optional[int]] = mapped_column(BigInteger)
    available_balance: Mapped[Optional[int]] = mapped_column(BigInteger)
    iso_currency_code: Mapped[str] = mapped_column(
        String(3),
        default="USD",
        nullable=False,
    )

    # Relationships
    bank_connection: Mapped[BankConnectionModel] = relationship(
        "BankConnectionModel",
        back_populates="accounts",
    )
    transactions: Mapped[list[TransactionModel]] = relationship(
        "TransactionModel",
        back_populates="account",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("idx_bank_account_connection_currency", "bank_connection_id", "iso_currency_code"),
    )

    def __repr__(self) -> str:
        return f"<BankAccountModel(id={self.id}, name={self.name}, mask={self.mask})>"
