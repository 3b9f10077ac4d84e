"""Authentication services."""

from finlink_auth.services.jwt_service import JWTService

__all__ = [
    "JWTService",
]
