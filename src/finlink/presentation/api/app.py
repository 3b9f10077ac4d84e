"""FastAPI application factory.

Creates and configures the FastAPI application with its routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI, Response, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from finlink.domain.shared.time import utc_now
from finlink.infrastructure.persistence.sqlalchemy.init_db import create_tables
from finlink.presentation.api.dependencies import DbSession, get_engine
from finlink.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from finlink.presentation.api.routers import (
    bank_accounts_router,
    bank_connections_router,
)
from finlink.presentation.api.schemas import HealthResponse
from finlink_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for finlink modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("finlink").setLevel(log_level)
    logging.getLogger("finlink_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Bank Accounts",
        "description": """Linked bank accounts and their transactions.

**Access:**
- Every route requires a bearer token
- Accounts are visible only to the user owning their bank connection

**Amounts:**
- All balances and amounts are integers in minor units (cents)

**Pagination:**
- `page` starts at 1, `pageSize` is clamped to 1..100 (default 50)
- Transactions are ordered by date, newest first
""",
    },
    {
        "name": "Bank Connections",
        "description": """Links to financial institutions.

- Each connection lists the accounts reached through it
- Deleted connections are never returned
""",
    },
    {
        "name": "Health",
        "description": "Service and database health.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting finlink API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down finlink API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(
        bank_accounts_router,
        prefix="/bank-accounts",
        tags=["Bank Accounts"],
    )
    v1_router.include_router(
        bank_connections_router,
        prefix="/bank-connections",
        tags=["Bank Connections"],
    )
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description="Read API for a user's **linked bank accounts** and transactions.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get(
        "/health",
        tags=["Health"],
        responses={503: {"model": HealthResponse, "description": "Database down"}},
    )
    async def health_check(session: DbSession, response: Response) -> HealthResponse:
        """Health check endpoint, unversioned for load balancers.

        Runs ``SELECT 1``; a failing database turns the status unhealthy
        and the HTTP status into 503.
        """
        try:
            await session.execute(text("SELECT 1"))
            database = "up"
        except (SQLAlchemyError, OSError) as e:
            logger.error("Database health check failed: %s", e)
            database = "down"

        healthy = database == "up"
        if not healthy:
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(
            status="healthy" if healthy else "unhealthy",
            version=API_VERSION,
            api_versions=["v1"],
            checks={"database": database},
            timestamp=utc_now(),
        )

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "bank_accounts": f"{API_V1_PREFIX}/bank-accounts",
                "bank_connections": f"{API_V1_PREFIX}/bank-connections",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
