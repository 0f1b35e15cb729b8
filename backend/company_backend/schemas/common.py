"""
Company Backend — Shared Response Schemas
==========================================

What:  Response models used outside the two CRUD resources.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body returned for rejected photo uploads.

    Example:
        {
            "error": "validation_error",
            "message": "File type '.exe' is not supported. Allowed types: .gif, .jpeg, .jpg, .png",
            "details": {"field": "file", "extension": ".exe"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for container and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
