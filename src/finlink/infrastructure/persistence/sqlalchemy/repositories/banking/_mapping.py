"""Model to domain mapping shared by the banking repositories."""

from __future__ import annotations

from finlink.domain.banking.value_objects import BankAccount, BankConnection
from finlink.infrastructure.persistence.sqlalchemy.models import (
    BankAccountModel,
    BankConnectionModel,
)


def map_connection(model: BankConnectionModel) -> BankConnection:
    return BankConnection(
        id=model.id,
        user_id=model.user_id,
        institution_id=model.institution_id,
        institution_name=model.institution_name,
        status=model.status,
        last_synced_at=model.last_synced_at,
        last_sync_status=model.last_sync_status,
        deleted_at=model.deleted_at,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def map_account(model: BankAccountModel, connection: BankConnection) -> BankAccount:
    """Map an account row, attaching an already mapped parent connection."""
    return BankAccount(
        id=model.id,
        bank_connection_id=model.bank_connection_id,
        external_account_id=model.external_account_id,
        name=model.name,
        official_name=model.official_name,
        type=model.type,
        subtype=model.subtype,
        mask=model.mask,
        current_balance=model.current_balance,
        available_balance=model.available_balance,
        iso_currency_code=model.iso_currency_code,
        created_at=model.created_at,
        updated_at=model.updated_at,
        connection=connection,
    )
