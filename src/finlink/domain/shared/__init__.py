"""Shared domain components.

Exports the exception hierarchy and time helpers used across the domain.
"""

from finlink.domain.shared.exceptions import (
    AccessDeniedError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)
from finlink.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "AccessDeniedError",
    "EntityNotFoundError",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
