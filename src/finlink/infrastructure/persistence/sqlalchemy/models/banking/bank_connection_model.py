"""SQLAlchemy model for bank connections."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from finlink.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from finlink.infrastructure.persistence.sqlalchemy.models.banking.bank_account_model import (  # NOQA: E501
        BankAccountModel,
    )


class BankConnectionModel(Base, TimestampMixin):
    """Database model for a user's link to one institution."""

    __tablename__ = "bank_connections"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Owner
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Provider linkage
    item_id: Mapped[Optional[str]] = mapped_column(String(255), unique=True)
    institution_id: Mapped[Optional[str]] = mapped_column(String(255))
    institution_name: Mapped[Optional[str]] = mapped_column(String(255))

    # State
    status: Mapped[str] = mapped_column(String(50), default="ACTIVE", nullable=False)
    last_synced_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    last_sync_status: Mapped[Optional[str]] = mapped_column(String(50))
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        index=True,
    )

    # Relationships
    accounts: Mapped[list[BankAccountModel]] = relationship(
        "BankAccountModel",
        back_populates="bank_connection",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return (
            f"<BankConnectionModel(id={self.id}, user_id={self.user_id}, "
            f"status={self.status})>"
        )
