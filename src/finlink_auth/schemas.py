"""Data structures passed between the token service and its callers."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user (the ``sub`` claim)
    email
        The user's email address
    exp
        Token expiration timestamp
    token_type
        Either "access" or "refresh"
    """

    user_id: UUID
    email: str
    exp: datetime
    token_type: str  # "access" or "refresh"

    def is_access_token(self) -> bool:
        """Check if this is an access token."""
        return self.token_type == "access"
