"""
Testcontainers-based PostgreSQL fixtures for integration tests.

A container is started once per session. Every test gets a clean schema
with two seeded users and a session maker bound to it.
"""

from dataclasses import dataclass
from uuid import UUID

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from finlink.infrastructure.persistence.sqlalchemy.models import Base, UserModel

# Use same Postgres version as production
POSTGRES_IMAGE = "postgres:16-alpine"

TEST_USER_ID = UUID("12345678-1234-5678-1234-567812345678")
TEST_USER_EMAIL = "test@example.com"

TEST_USER_ID_2 = UUID("00000000-0000-0000-0000-000000000002")
TEST_USER_EMAIL_2 = "test2@example.com"


@dataclass(frozen=True)
class IntegrationUserContext:
    user_id: UUID
    email: str


@pytest.fixture
def user_context() -> IntegrationUserContext:
    return IntegrationUserContext(user_id=TEST_USER_ID, email=TEST_USER_EMAIL)


@pytest.fixture
def other_user_context() -> IntegrationUserContext:
    return IntegrationUserContext(user_id=TEST_USER_ID_2, email=TEST_USER_EMAIL_2)


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is automatically cleaned up when the session ends.
    """
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def postgres_url(postgres_container) -> str:
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    url = postgres_container.get_connection_url()
    url = url.replace("postgresql+psycopg2://", "postgresql+asyncpg://")
    return url.replace("postgresql://", "postgresql+asyncpg://")


@pytest_asyncio.fixture
async def async_engine(postgres_url):
    engine = create_async_engine(postgres_url, echo=False, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(async_engine):
    """Session maker on a schema seeded with the two test users."""
    maker = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as session:
        session.add_all(
            [
                UserModel(id=TEST_USER_ID, email=TEST_USER_EMAIL),
                UserModel(id=TEST_USER_ID_2, email=TEST_USER_EMAIL_2),
            ],
        )
        await session.commit()
    return maker
