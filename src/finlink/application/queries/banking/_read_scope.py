"""Read transaction scoping shared by the banking queries."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager, nullcontext
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from finlink.application.factories import ReadTransactionProvider


def read_scope(
    provider: Optional[ReadTransactionProvider],
) -> AbstractAsyncContextManager[None]:
    """Read transaction of ``provider``, or a no-op block without one."""
    if provider is None:
        return nullcontext()
    return provider.read_transaction()
