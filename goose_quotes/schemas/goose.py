"""
Goose Quotes Backend: Pydantic Request/Response Schemas
========================================================

What:  The API contract for the geese endpoints.
How:   FastAPI validates request bodies against these models and serializes
       responses through them (by alias, so JSON keys are camelCase:
       `isFlockLeader`, `programmingLanguage`, `createdAt`, ...).
       Request bodies accept either camelCase or snake_case keys.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every schema exchanged with clients."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class GooseCreate(CamelModel):
    """
    Body of POST /api/geese.

    Only `name` is required. `description` is not accepted: it is derived
    from the name when the row is created.
    """
    name: str = Field(min_length=1, description="Name of the goose")
    is_flock_leader: bool = Field(default=False, description="Whether the goose leads a flock")
    programming_language: Optional[str] = Field(default=None)
    motivations: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None)


class GooseNameUpdate(CamelModel):
    """Body of PATCH /api/geese/{id}."""
    name: str = Field(min_length=1, description="New name for the goose")


class GooseMotivationsUpdate(CamelModel):
    """Body of PATCH /api/geese/{id}/motivations."""
    motivations: str = Field(description="Replacement motivations text")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class GooseResponse(CamelModel):
    """A full goose row, as returned by every endpoint that returns a goose."""
    id: int
    name: str
    description: Optional[str] = None
    is_flock_leader: bool = False
    programming_language: Optional[str] = None
    motivations: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class QuotesResponse(CamelModel):
    """Returned by POST /api/geese/{id}/generate. Quotes are never persisted."""
    name: str
    quotes: List[str]


class ImageResponse(CamelModel):
    """Returned by POST /api/geese/{id}/image (`{"imageUrl": ...}`)."""
    image_url: str


class MessageResponse(CamelModel):
    """Plain `{"message": ...}` body, used by honk and by 404 responses."""
    message: str


class ErrorResponse(BaseModel):
    """
    Error body for every failure except 404.

    Fields:
        error: Machine-readable error code (e.g. "validation_error")
        message: Human-readable description
        details: Optional extra context
        request_id: Correlation ID for the server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, degraded, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    llm: str = Field(description="LLM provider status: available, unavailable")
    llm_provider: str = Field(description="Configured LLM provider name")
    uptime_seconds: float = Field(description="Seconds since service started")
