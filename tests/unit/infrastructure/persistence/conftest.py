"""
Pytest fixtures for infrastructure persistence tests.

Each test gets a fresh SQLite database file with the full schema and two
seeded users. Set TEST_DATABASE_URL to run the same tests against another
database (e.g. a local PostgreSQL).
"""

import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from finlink.infrastructure.persistence.sqlalchemy.models import (
    BankAccountModel,
    BankConnectionModel,
    Base,
    TransactionModel,
    UserModel,
)

# Fixed UUIDs for testing - ensures deterministic behavior
TEST_USER_ID = UUID("12345678-1234-5678-1234-567812345678")
TEST_USER_EMAIL = "test@example.com"

# Secondary test user for isolation tests
TEST_USER_ID_2 = UUID("00000000-0000-0000-0000-000000000002")
TEST_USER_EMAIL_2 = "test2@example.com"

BASE_DATE = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)


@dataclass(frozen=True)
class MockUserContext:
    """Mock UserContext for testing."""

    user_id: UUID
    email: str = TEST_USER_EMAIL


@pytest.fixture
def user_context():
    """Provide a test UserContext for repository tests."""
    return MockUserContext(user_id=TEST_USER_ID)


@pytest.fixture
def other_user_context():
    return MockUserContext(user_id=TEST_USER_ID_2, email=TEST_USER_EMAIL_2)


@pytest_asyncio.fixture
async def async_engine(tmp_path):
    url = os.environ.get("TEST_DATABASE_URL") or (
        f"sqlite+aiosqlite:///{tmp_path / 'finlink-test.db'}"
    )
    engine = create_async_engine(url, echo=False, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(async_engine):
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def async_session(session_maker):
    """Session on a database seeded with the two test users."""
    async with session_maker() as session:
        session.add_all(
            [
                UserModel(id=TEST_USER_ID, email=TEST_USER_EMAIL),
                UserModel(id=TEST_USER_ID_2, email=TEST_USER_EMAIL_2),
            ],
        )
        await session.commit()
        yield session


@pytest.fixture
def seed(async_session):
    """Helpers inserting connections, accounts and transactions."""

    class Seeder:
        async def connection(
            self,
            user_id: UUID = TEST_USER_ID,
            status: str = "ACTIVE",
            deleted_at: datetime | None = None,
            created_at: datetime | None = None,
        ) -> BankConnectionModel:
            model = BankConnectionModel(
                id=uuid4(),
                user_id=user_id,
                item_id=f"item-{uuid4()}",
                institution_id="ins_1",
                institution_name="First Platypus Bank",
                status=status,
                deleted_at=deleted_at,
            )
            if created_at is not None:
                model.created_at = created_at
            async_session.add(model)
            await async_session.commit()
            return model

        async def account(  # NOQA: PLR0913
            self,
            connection: BankConnectionModel,
            name: str = "Checking",
            available: int | None = 0,
            current: int | None = 0,
            currency: str = "USD",
            created_at: datetime | None = None,
        ) -> BankAccountModel:
            model = BankAccountModel(
                id=uuid4(),
                bank_connection_id=connection.id,
                external_account_id=f"acc-{uuid4()}",
                name=name,
                type="depository",
                subtype="checking",
                mask="0000",
                available_balance=available,
                current_balance=current,
                iso_currency_code=currency,
            )
            if created_at is not None:
                model.created_at = created_at
            async_session.add(model)
            await async_session.commit()
            return model

        async def transactions(
            self,
            account: BankAccountModel,
            count: int,
        ) -> list[TransactionModel]:
            """Insert ``count`` transactions, ``txn-001`` being the newest."""
            models = [
                TransactionModel(
                    id=uuid4(),
                    bank_account_id=account.id,
                    external_transaction_id=f"txn-{uuid4()}",
                    name=f"txn-{i:03d}",
                    amount=-100 * i,
                    iso_currency_code=account.iso_currency_code,
                    date=BASE_DATE - timedelta(days=i - 1),
                    pending=i == 1,
                    category=["Food and Drink", "Restaurants"],
                    payment_channel="in store",
                    merchant_name=f"Merchant {i}",
                )
                for i in range(1, count + 1)
            ]
            async_session.add_all(models)
            await async_session.commit()
            return models

    return Seeder()
