"""
BirdAPI: Pydantic Schemas
==========================

What:  The Bird record plus the response shapes the API returns.
Why:   The same model validates what stores hand back and serializes what
       GET /bird returns, so the JSON contract lives in one place.

Design Decision:
    Bird is separate from the BirdRecord ORM row. The ORM row carries a
    surrogate id the API never exposes; Bird is exactly the
    species/description pair clients send and receive.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Bird(BaseModel):
    """
    A bird record: the only entity the service stores.

    Frozen because records are never edited after creation. Both fields
    default to empty strings; presence is not enforced.
    """
    model_config = ConfigDict(frozen=True, from_attributes=True)

    species: str = Field(default="", description="Species name, e.g. 'Crow'")
    description: str = Field(default="", description="Free-form description")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "form_parse_error",
            "message": "The submitted form could not be parsed",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store: str = Field(description="Active store variant: memory, sql")
    storage: str = Field(description="Storage reachability: connected, disconnected")
