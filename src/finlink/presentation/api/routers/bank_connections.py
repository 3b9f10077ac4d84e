"""Bank connections router: the user's institution links."""

from uuid import UUID

from fastapi import APIRouter

from finlink.application.queries import (
    GetBankConnectionQuery,
    ListBankConnectionsQuery,
)
from finlink.domain.banking.exceptions import BankConnectionNotFoundError
from finlink.presentation.api.dependencies import RepoFactory
from finlink.presentation.api.schemas import BankConnectionResponse, ErrorResponse

router = APIRouter()


def _parse_connection_id(connection_id: str) -> UUID:
    try:
        return UUID(connection_id)
    except ValueError:
        raise BankConnectionNotFoundError(connection_id) from None


@router.get(
    "",
    summary="List bank connections",
    responses={
        200: {"description": "Live connections with their accounts"},
    },
)
async def list_bank_connections(
    factory: RepoFactory,
) -> list[BankConnectionResponse]:
    """List the current user's connections, newest first.

    Deleted connections are left out.
    """
    query = ListBankConnectionsQuery.from_factory(factory)
    connections = await query.execute()
    return [BankConnectionResponse.from_dto(dto) for dto in connections]


@router.get(
    "/{connection_id}",
    summary="Get bank connection",
    responses={
        200: {"description": "The connection with its accounts"},
        403: {
            "model": ErrorResponse,
            "description": "Connection belongs to another user",
        },
        404: {"model": ErrorResponse, "description": "Connection not found"},
    },
)
async def get_bank_connection(
    connection_id: str,
    factory: RepoFactory,
) -> BankConnectionResponse:
    """Get a single connection owned by the current user."""
    query = GetBankConnectionQuery.from_factory(factory)
    result = await query.execute(_parse_connection_id(connection_id))
    return BankConnectionResponse.from_dto(result)
