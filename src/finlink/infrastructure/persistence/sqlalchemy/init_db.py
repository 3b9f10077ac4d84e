"""Database initialization utilities."""

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Import models to register with Base.metadata
import finlink.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from finlink.infrastructure.persistence.sqlalchemy.models.base import Base
from finlink_config.settings import get_settings

logger = logging.getLogger(__name__)


def _get_engine() -> AsyncEngine:
    """Get a dedicated engine for schema management."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")


async def _reset_database(force: bool = False) -> None:
    """Drop all tables and recreate them."""
    database_url = get_settings().database_url
    db_display = database_url.split("@")[-1] if "@" in database_url else database_url
    print(f"Database: {db_display}")

    if not force:
        print("WARNING: This will DELETE ALL DATA in the database!")
        response = input("Type 'yes' to confirm: ")
        if response.lower() != "yes":
            print("Aborted.")
            sys.exit(1)

    engine = _get_engine()
    try:
        await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()


async def _init_database() -> None:
    engine = _get_engine()
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


def db_init() -> None:
    """Initialize database (create tables)."""
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_init_database())


def db_reset() -> None:
    """Drop and recreate all database tables."""
    logging.basicConfig(level=logging.INFO)
    force = "--force" in sys.argv or "-f" in sys.argv
    asyncio.run(_reset_database(force=force))
