"""Common schemas shared across API endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response model serialised with camelCase keys.

    Fields are declared in snake_case; ``populate_by_name`` lets the
    routers build instances from DTO attribute names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")
    path: str | None = Field(None, description="Request path that failed")
    timestamp: datetime | None = Field(None, description="When the error occurred")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "detail": "Bank account not found",
                "code": "ACCOUNT_NOT_FOUND",
                "path": "/api/v1/bank-accounts/00000000-0000-0000-0000-000000000000",
                "timestamp": "2024-01-01T00:00:00+00:00",
            },
        },
    )


class HealthResponse(CamelModel):
    """Health check response schema."""

    status: str = Field(..., description="healthy or unhealthy")
    version: str = Field(..., description="API version")
    api_versions: list[str] = Field(default_factory=list)
    checks: dict[str, str] = Field(
        default_factory=dict,
        description="Per-dependency state, up or down",
    )
    timestamp: datetime | None = None
