# vocab_http_api/schemas/common.py

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base pydantic model for all HTTP API schemas.

    - populate_by_name so both field names and legacy aliases are accepted
    - from_attributes so ORM rows can be validated directly
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


LanguageID = Annotated[int, Field(gt=0, description="Language identifier.")]


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


class ErrorResponse(APIModel):
    """
    Standard error envelope for all endpoints.
    """

    status: str = Field("error", description="Always 'error'.")
    code: int = Field(..., description="HTTP status code.")
    error: str = Field(
        ...,
        description="Stable, machine-readable error code (e.g. 'malformed_input').",
    )
    message: str = Field(..., description="Human-readable explanation.")


__all__ = [
    "APIModel",
    "LanguageID",
    "ErrorResponse",
]
