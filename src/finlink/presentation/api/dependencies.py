"""FastAPI dependency injection for the finlink API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT)
- User context for repository scoping
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from finlink.application.context import UserContext
from finlink.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)
from finlink_auth import InvalidTokenError, JWTService, TokenPayload
from finlink_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=get_settings().db_echo,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_settings),
) -> JWTService:
    """Get JWT service configured with application settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> TokenPayload:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Extracts and validates the JWT token from the Authorization header,
    then confirms that the user still exists.

    Parameters
    ----------
    credentials
        Bearer token from Authorization header
    session
        Database session
    jwt_service
        JWT service for token verification

    Returns
    -------
    The verified token payload

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or user not found
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise _unauthorized("Invalid or expired token") from e

    if not payload.is_access_token():
        logger.warning(
            "Non-access token presented for user: %s",
            payload.user_id,
        )
        raise _unauthorized("Invalid token type")

    # Own short transaction so the request's read transaction starts clean
    async with session.begin():
        exists = await UserRepositorySQLAlchemy(session).exists(payload.user_id)

    if not exists:
        logger.warning("User not found for token: %s", payload.user_id)
        raise _unauthorized("User not found")

    return payload


# -----------------------------------------------------------------------------
# User Context & Repository Factory
# -----------------------------------------------------------------------------


async def get_user_context(
    user: TokenPayload = Depends(get_current_user),
) -> UserContext:
    """
    Get UserContext for repository scoping.

    The UserContext is used to scope repository queries to the current user.
    """
    return UserContext.from_values(user_id=user.user_id, email=user.email)


async def get_repository_factory(
    session: AsyncSession = Depends(get_db_session),
    user_context: UserContext = Depends(get_user_context),
    settings: Settings = Depends(get_settings),
) -> SQLAlchemyRepositoryFactory:
    """
    Get repository factory for the current user.

    The factory creates user-scoped repositories and scopes read
    transactions at the configured isolation level.
    """
    return SQLAlchemyRepositoryFactory(
        session=session,
        user_context=user_context,
        read_isolation_level=settings.read_isolation_level,
    )


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]

# Type alias for injected database session
DbSession = Annotated[AsyncSession, Depends(get_db_session)]

# Type alias for injected settings
AppSettings = Annotated[Settings, Depends(get_settings)]
