"""Banking domain exceptions."""

from uuid import UUID

from finlink.domain.shared.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    ErrorCode,
)


class BankAccountNotFoundError(EntityNotFoundError):
    """Raised when a bank account does not exist (or is not addressable)."""

    def __init__(self, account_id: UUID | str | None = None) -> None:
        super().__init__(
            message="Bank account not found",
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            details={"account_id": str(account_id)} if account_id else None,
        )


class BankAccountAccessDeniedError(AccessDeniedError):
    """Raised when a bank account exists but belongs to another user.

    The owner is recorded in ``details`` for the audit log only; the message
    returned to the caller never names it.
    """

    def __init__(
        self,
        account_id: UUID,
        user_id: UUID,
        owner_id: UUID,
    ) -> None:
        super().__init__(
            message="You do not have access to this bank account",
            details={
                "account_id": str(account_id),
                "user_id": str(user_id),
                "owner_id": str(owner_id),
            },
        )


class BankConnectionNotFoundError(EntityNotFoundError):
    """Raised when a bank connection does not exist or was soft-deleted."""

    def __init__(self, connection_id: UUID | str | None = None) -> None:
        super().__init__(
            message="Bank connection not found",
            code=ErrorCode.CONNECTION_NOT_FOUND,
            details={"connection_id": str(connection_id)} if connection_id else None,
        )


class BankConnectionAccessDeniedError(AccessDeniedError):
    """Raised when a bank connection belongs to another user."""

    def __init__(
        self,
        connection_id: UUID,
        user_id: UUID,
        owner_id: UUID,
    ) -> None:
        super().__init__(
            message="You do not have access to this bank connection",
            details={
                "connection_id": str(connection_id),
                "user_id": str(user_id),
                "owner_id": str(owner_id),
            },
        )
