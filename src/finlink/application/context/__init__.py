"""Request-scoped context objects."""

from finlink.application.context.user_context import UserContext

__all__ = ["UserContext"]
