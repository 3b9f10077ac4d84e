"""Bank connection status."""

from enum import Enum


class ConnectionStatus(str, Enum):
    """Lifecycle states of a bank connection.

    Stored as plain strings; providers may report states not listed here,
    which are treated as not active.
    """

    ACTIVE = "ACTIVE"
    ERROR = "ERROR"
    DISABLED = "DISABLED"
