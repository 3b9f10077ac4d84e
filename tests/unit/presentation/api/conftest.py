"""Pytest fixtures for API tests.

The app runs against a SQLite file seeded once per test. Engines use
NullPool so no connection outlives the event loop that opened it (seeding
runs in its own loop, requests in the TestClient's).
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from finlink.domain.shared.time import utc_now
from finlink.infrastructure.persistence.sqlalchemy.models import (
    BankAccountModel,
    BankConnectionModel,
    Base,
    TransactionModel,
    UserModel,
)
from finlink.presentation.api.app import API_V1_PREFIX, create_app
from finlink.presentation.api.dependencies import get_db_session
from finlink_auth import JWTService
from finlink_config.settings import Settings, get_settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"
OWNER_ID = UUID("12345678-1234-5678-1234-567812345678")
OTHER_ID = UUID("00000000-0000-0000-0000-000000000002")
BASE_DATE = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)


@dataclass
class SeededBank:
    """Ids of the rows seeded for API tests."""

    checking_id: UUID
    savings_id: UUID
    euro_id: UUID
    errored_id: UUID
    deleted_id: UUID
    foreign_id: UUID
    active_connection_id: UUID
    errored_connection_id: UUID
    deleted_connection_id: UUID
    foreign_connection_id: UUID
    listed_ids: set[UUID] = field(default_factory=set)


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'finlink-api.db'}"


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test settings with debug enabled and a SQLite database."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url_override=database_url,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def test_engine(database_url):
    engine = create_async_engine(database_url, echo=False, poolclass=NullPool)
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def test_session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


def _transactions(account_id: UUID, count: int) -> list[TransactionModel]:
    return [
        TransactionModel(
            id=uuid4(),
            bank_account_id=account_id,
            external_transaction_id=f"txn-{uuid4()}",
            name=f"txn-{i:03d}",
            amount=-100 * i,
            iso_currency_code="USD",
            date=BASE_DATE - timedelta(days=i - 1),
            pending=False,
            category=["Transfer"],
        )
        for i in range(1, count + 1)
    ]


def _account(connection_id: UUID, name: str, **kwargs) -> BankAccountModel:
    values = {
        "available_balance": 0,
        "current_balance": 0,
        "iso_currency_code": "USD",
        "mask": "0000",
    }
    values.update(kwargs)
    return BankAccountModel(
        id=uuid4(),
        bank_connection_id=connection_id,
        external_account_id=f"acc-{uuid4()}",
        name=name,
        type="depository",
        subtype="checking",
        **values,
    )


async def _seed(engine, session_maker) -> SeededBank:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with session_maker() as session:
        session.add_all(
            [
                UserModel(id=OWNER_ID, email="owner@example.com"),
                UserModel(id=OTHER_ID, email="other@example.com"),
            ],
        )
        active = BankConnectionModel(
            id=uuid4(),
            user_id=OWNER_ID,
            institution_name="First Platypus Bank",
            status="ACTIVE",
            last_synced_at=BASE_DATE,
            last_sync_status="SUCCESS",
            created_at=BASE_DATE,
        )
        errored = BankConnectionModel(
            id=uuid4(),
            user_id=OWNER_ID,
            status="ERROR",
            created_at=BASE_DATE - timedelta(days=1),
        )
        deleted = BankConnectionModel(
            id=uuid4(),
            user_id=OWNER_ID,
            status="ACTIVE",
            deleted_at=utc_now(),
        )
        foreign = BankConnectionModel(id=uuid4(), user_id=OTHER_ID, status="ACTIVE")
        session.add_all([active, errored, deleted, foreign])
        await session.flush()

        checking = _account(
            active.id,
            "Checking",
            available_balance=10000,
            current_balance=10500,
            mask="1111",
        )
        savings = _account(
            active.id,
            "Savings",
            available_balance=2500,
            current_balance=2500,
            mask=None,
        )
        euro = _account(
            active.id,
            "Euro",
            available_balance=400,
            current_balance=None,
            iso_currency_code="EUR",
        )
        errored_account = _account(
            errored.id,
            "Errored",
            available_balance=777,
            current_balance=777,
        )
        deleted_account = _account(deleted.id, "Deleted", available_balance=5)
        foreign_account = _account(foreign.id, "Foreign", available_balance=9)
        session.add_all(
            [checking, savings, euro, errored_account, deleted_account, foreign_account],
        )
        await session.flush()

        session.add_all(_transactions(checking.id, 120))
        session.add_all(_transactions(foreign_account.id, 3))
        await session.commit()

        return SeededBank(
            checking_id=checking.id,
            savings_id=savings.id,
            euro_id=euro.id,
            errored_id=errored_account.id,
            deleted_id=deleted_account.id,
            foreign_id=foreign_account.id,
            active_connection_id=active.id,
            errored_connection_id=errored.id,
            deleted_connection_id=deleted.id,
            foreign_connection_id=foreign.id,
            listed_ids={checking.id, savings.id, euro.id, errored_account.id},
        )


@pytest.fixture
def seeded(test_engine, test_session_maker) -> SeededBank:
    """Schema plus the bank data described in SeededBank."""
    return asyncio.run(_seed(test_engine, test_session_maker))


@pytest.fixture
def test_client(api_settings, test_session_maker, seeded) -> TestClient:
    """Create a test client bound to the seeded database."""
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_settings] = lambda: api_settings

    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_JWT_SECRET)


def _bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(jwt_service) -> dict:
    """Bearer headers for the seeded account owner."""
    return _bearer(jwt_service.create_access_token(OWNER_ID, "owner@example.com"))


@pytest.fixture
def other_auth_headers(jwt_service) -> dict:
    """Bearer headers for the second seeded user."""
    return _bearer(jwt_service.create_access_token(OTHER_ID, "other@example.com"))


@pytest.fixture
def make_headers():
    """Build bearer headers from a raw token."""
    return _bearer
