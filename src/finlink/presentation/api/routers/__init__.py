from finlink.presentation.api.routers.bank_accounts import (
    router as bank_accounts_router,
)
from finlink.presentation.api.routers.bank_connections import (
    router as bank_connections_router,
)

__all__ = [
    "bank_accounts_router",
    "bank_connections_router",
]
