"""Bank accounts router: account listing, balances and transactions."""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query

from finlink.application.queries import (
    ConsolidatedBalanceQuery,
    GetBankAccountQuery,
    ListAccountTransactionsQuery,
    ListBankAccountsQuery,
)
from finlink.domain.banking.exceptions import BankAccountNotFoundError
from finlink.presentation.api.dependencies import AppSettings, RepoFactory
from finlink.presentation.api.schemas import (
    BankAccountResponse,
    ConsolidatedBalanceResponse,
    ErrorResponse,
    TransactionPageResponse,
)

router = APIRouter()

# Pagination values arrive as raw strings; anything non-numeric falls back
# to the default instead of failing validation.
CurrencyFilter = Annotated[
    str | None,
    Query(description="ISO 4217 currency code (default USD)"),
]
PageParam = Annotated[
    str | None,
    Query(description="1-based page number, values below 1 read as 1"),
]
PageSizeParam = Annotated[
    str | None,
    Query(alias="pageSize", description="Items per page, clamped to [1, 100]"),
]

_ACCOUNT_ERRORS = {
    403: {"model": ErrorResponse, "description": "Account belongs to another user"},
    404: {"model": ErrorResponse, "description": "Account not found"},
}


def _parse_int(value: Optional[str]) -> Optional[int]:
    """Lenient integer parsing for query strings."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _parse_account_id(account_id: str) -> UUID:
    """Ids that are not UUIDs cannot exist, so they are reported as not found."""
    try:
        return UUID(account_id)
    except ValueError:
        raise BankAccountNotFoundError(account_id) from None


@router.get(
    "",
    summary="List bank accounts",
    responses={
        200: {"description": "Accounts under the user's connections"},
    },
)
async def list_bank_accounts(
    factory: RepoFactory,
    settings: AppSettings,
) -> list[BankAccountResponse]:
    """List all bank accounts of the current user, newest first."""
    query = ListBankAccountsQuery.from_factory(
        factory,
        require_active_connection=settings.finlink_list_require_active_connection,
    )
    accounts = await query.execute()
    return [BankAccountResponse.from_dto(dto) for dto in accounts]


# Declared before "/{account_id}" so the literal path wins.
@router.get(
    "/consolidated-balance",
    summary="Consolidated balance",
    responses={
        200: {"description": "Totals across accounts in one currency"},
    },
)
async def get_consolidated_balance(
    factory: RepoFactory,
    settings: AppSettings,
    currency: CurrencyFilter = None,
) -> ConsolidatedBalanceResponse:
    """
    Sum available and current balances across the user's accounts.

    Only accounts held in the requested currency under an active,
    non-deleted connection are included. The currency code is stripped
    and upper-cased before matching; a missing or blank value means the
    configured default.
    """
    query = ConsolidatedBalanceQuery.from_factory(
        factory,
        require_active_connection=settings.finlink_balance_require_active_connection,
        default_currency=settings.finlink_default_currency,
    )
    result = await query.execute(currency=currency)
    return ConsolidatedBalanceResponse.from_dto(result)


@router.get(
    "/{account_id}",
    summary="Get bank account",
    responses={
        200: {"description": "The account"},
        **_ACCOUNT_ERRORS,
    },
)
async def get_bank_account(
    account_id: str,
    factory: RepoFactory,
) -> BankAccountResponse:
    """Get a single bank account owned by the current user."""
    query = GetBankAccountQuery.from_factory(factory)
    result = await query.execute(_parse_account_id(account_id))
    return BankAccountResponse.from_dto(result)


@router.get(
    "/{account_id}/transactions",
    summary="List account transactions",
    responses={
        200: {"description": "One page of transactions, newest first"},
        **_ACCOUNT_ERRORS,
    },
)
async def list_account_transactions(
    account_id: str,
    factory: RepoFactory,
    settings: AppSettings,
    page: PageParam = None,
    page_size: PageSizeParam = None,
) -> TransactionPageResponse:
    """
    List transactions of a bank account.

    Out-of-range or malformed pagination values are clamped or replaced by
    defaults; the applied values are echoed in the response.
    """
    query = ListAccountTransactionsQuery.from_factory(
        factory,
        default_page_size=settings.finlink_default_page_size,
        max_page_size=settings.finlink_max_page_size,
    )
    result = await query.execute(
        _parse_account_id(account_id),
        page=_parse_int(page),
        page_size=_parse_int(page_size),
    )
    return TransactionPageResponse.from_dto(result)
