"""
Item Service — Pydantic Request/Response Schemas
==================================================

What:  Pydantic models defining the HTTP contract of the item API.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate the OpenAPI documentation.
Who:   Used by route handlers as body types and response models.

Schemas are separate from the stored Item record: the record is what the
store owns, the schemas are what crosses the wire.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class ItemCreate(BaseModel):
    """Body of POST /items."""

    name: str = Field(description="Item name (must not be empty)")


class ItemUpdate(BaseModel):
    """Body of PUT /items/{id}. Only the name can change; the id is immutable."""

    name: str = Field(description="New item name (must not be empty)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class ItemResponse(BaseModel):
    """
    What:  JSON representation of a single item.
    Who:   Returned by every item endpoint (as an array by GET /items).

    Example:
        {"id": 1, "name": "pen"}
    """

    id: int = Field(description="Unique item identifier, assigned by the service")
    name: str = Field(description="Item name")

    model_config = {"from_attributes": True}


ItemListResponse = List[ItemResponse]


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by all endpoints.

    Fields:
        error: Machine-readable error code (invalid_input, not_found, ...)
        message: Human-readable description, safe to show to users
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "not_found",
            "message": "item with ID '42' was not found",
            "request_id": "1f0c2a9b"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    environment: str = Field(description="Run mode: development, production, test")
    item_count: int = Field(description="Number of items currently held in memory")
    uptime_seconds: float = Field(description="Seconds since service started")
