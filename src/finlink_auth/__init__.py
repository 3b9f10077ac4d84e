"""finlink auth - bearer token verification.

Resolves the caller identity for the bank account API. Token issuance to end
users lives elsewhere; ``JWTService.create_access_token`` exists for service
accounts and tests.

Architecture:
    finlink_auth/
    ├── services/           # JWT creation and verification
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions
"""

from finlink_auth.exceptions import AuthError, InvalidTokenError
from finlink_auth.schemas import TokenPayload
from finlink_auth.services import JWTService

__all__ = [
    "JWTService",
    "TokenPayload",
    "AuthError",
    "InvalidTokenError",
]
