"""
Base schemas and common components used across all API schemas.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Error kind, e.g. 'not_found'")
    detail: str = Field(..., description="Human-readable error description")
    timestamp: datetime = Field(default_factory=_utcnow)


class HealthCheckResponse(BaseModel):
    """Health check endpoint response."""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    database: Optional[str] = Field(None, description="Database connection status")
