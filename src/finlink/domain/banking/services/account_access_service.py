"""Ownership check guarding every single-account read."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from finlink.domain.banking.exceptions import (
    BankAccountAccessDeniedError,
    BankAccountNotFoundError,
    BankConnectionAccessDeniedError,
    BankConnectionNotFoundError,
)
from finlink.domain.banking.value_objects import BankAccount, BankConnectionOverview

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of an ownership check."""

    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> AccessDecision:
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> AccessDecision:
        return cls(allowed=False, reason=reason)


class AccountAccessService:
    """Decides whether a caller may see a bank account.

    An account is visible only to the user owning its parent connection.
    A missing account is reported as not found before ownership is looked at.
    Connections follow the same rules.
    """

    @staticmethod
    def authorize(caller_user_id: UUID, account: BankAccount) -> AccessDecision:
        if account.owner_id == caller_user_id:
            return AccessDecision.allow()
        return AccessDecision.deny("caller does not own the account")

    @staticmethod
    def ensure_access(
        caller_user_id: UUID,
        account_id: UUID,
        account: Optional[BankAccount],
    ) -> BankAccount:
        """Return the account if the caller owns it.

        Parameters
        ----------
        caller_user_id
            Authenticated user
        account_id
            Id the caller asked for
        account
            Result of the lookup, ``None`` when nothing was found

        Returns
        -------
        The account, unchanged

        Raises
        ------
        BankAccountNotFoundError
            If ``account`` is None
        BankAccountAccessDeniedError
            If the account belongs to another user
        """
        if account is None:
            raise BankAccountNotFoundError(account_id)

        decision = AccountAccessService.authorize(caller_user_id, account)
        if not decision.allowed:
            logger.warning(
                "Access denied to bank account: user=%s account=%s owner=%s",
                caller_user_id,
                account.id,
                account.owner_id,
            )
            raise BankAccountAccessDeniedError(
                account_id=account.id,
                user_id=caller_user_id,
                owner_id=account.owner_id,
            )
        return account

    @staticmethod
    def authorize_connection(
        caller_user_id: UUID,
        connection: BankConnectionOverview,
    ) -> AccessDecision:
        if connection.owner_id == caller_user_id:
            return AccessDecision.allow()
        return AccessDecision.deny("caller does not own the connection")

    @staticmethod
    def ensure_connection_access(
        caller_user_id: UUID,
        connection_id: UUID,
        connection: Optional[BankConnectionOverview],
    ) -> BankConnectionOverview:
        """Return the connection if the caller owns it.

        Raises
        ------
        BankConnectionNotFoundError
            If ``connection`` is None
        BankConnectionAccessDeniedError
            If the connection belongs to another user
        """
        if connection is None:
            raise BankConnectionNotFoundError(connection_id)

        decision = AccountAccessService.authorize_connection(caller_user_id, connection)
        if not decision.allowed:
            logger.warning(
                "Access denied to bank connection: user=%s connection=%s owner=%s",
                caller_user_id,
                connection.id,
                connection.owner_id,
            )
            raise BankConnectionAccessDeniedError(
                connection_id=connection.id,
                user_id=caller_user_id,
                owner_id=connection.owner_id,
            )
        return connection
