"""
Tutor API — Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract for the tutor resource.
Why:   Automatic parsing, serialization, and OpenAPI doc generation.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate Swagger/OpenAPI documentation automatically.

Design Decision:
    The payload carries an optional `id` because create and update share one
    body shape: create requires it absent, update requires it present. Those
    checks live in the route, not here, so they answer with 400 and alert
    headers rather than FastAPI's 422.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class TutorPayload(BaseModel):
    """
    Body of POST /api/tutors and PUT /api/tutors.

    Every attribute is optional. On update, an omitted attribute is stored
    as null (full replace).
    """
    id: Optional[int] = Field(default=None, description="Tutor identifier; absent on create")
    name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    subject: Optional[str] = Field(default=None, max_length=255)

    def attributes(self) -> dict:
        """Every column value except the identifier, with None for omitted fields."""
        return self.model_dump(exclude={"id"})


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class TutorResponse(BaseModel):
    """
    A stored tutor.

    Returned by every tutor endpoint except DELETE.
    """
    id: int = Field(description="Tutor identifier")
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "tutor with ID '7' was not found",
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
