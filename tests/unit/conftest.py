"""Builders for banking domain objects used across unit tests."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest

from finlink.application.context import UserContext
from finlink.domain.banking.value_objects import (
    BankAccount,
    BankConnection,
    Transaction,
)

OWNER_ID = UUID("12345678-1234-5678-1234-567812345678")
OTHER_USER_ID = UUID("00000000-0000-0000-0000-000000000002")

BASE_DATE = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def owner_id() -> UUID:
    return OWNER_ID


@pytest.fixture
def other_user_id() -> UUID:
    return OTHER_USER_ID


@pytest.fixture
def owner_context() -> UserContext:
    return UserContext.from_values(user_id=OWNER_ID, email="owner@example.com")


@pytest.fixture
def make_connection():
    """Factory for BankConnection value objects."""

    def _make(
        user_id: UUID = OWNER_ID,
        status: str = "ACTIVE",
        deleted_at: datetime | None = None,
    ) -> BankConnection:
        return BankConnection(
            id=uuid4(),
            user_id=user_id,
            institution_id="ins_1",
            institution_name="First Platypus Bank",
            status=status,
            deleted_at=deleted_at,
        )

    return _make


@pytest.fixture
def make_account(make_connection):
    """Factory for BankAccount value objects (with their connection)."""

    def _make(
        user_id: UUID = OWNER_ID,
        available: int | None = 0,
        current: int | None = 0,
        currency: str = "USD",
        name: str = "Checking",
        mask: str | None = "0000",
        connection: BankConnection | None = None,
        account_id: UUID | None = None,
    ) -> BankAccount:
        connection = connection or make_connection(user_id=user_id)
        return BankAccount(
            id=account_id or uuid4(),
            bank_connection_id=connection.id,
            external_account_id=f"ext-{uuid4()}",
            name=name,
            type="depository",
            subtype="checking",
            mask=mask,
            current_balance=current,
            available_balance=available,
            iso_currency_code=currency,
            connection=connection,
        )

    return _make


@pytest.fixture
def make_transactions():
    """Factory for N transactions on one account, newest first.

    Transaction ``i`` (1-based) is dated ``i - 1`` days before BASE_DATE
    and named ``txn-{i:03d}``.
    """

    def _make(account_id: UUID, count: int) -> list[Transaction]:
        return [
            Transaction(
                id=uuid4(),
                bank_account_id=account_id,
                external_transaction_id=f"ext-txn-{i}",
                amount=-100 * i,
                iso_currency_code="USD",
                date=BASE_DATE - timedelta(days=i - 1),
                name=f"txn-{i:03d}",
                pending=False,
                category=["Shops"],
            )
            for i in range(1, count + 1)
        ]

    return _make
