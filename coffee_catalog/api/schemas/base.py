"""
Base schemas shared across endpoints: response envelope, errors, health.
"""

from __future__ import annotations

from datetime import datetime, UTC
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(UTC)


# ---------- RESPONSE ENVELOPE ----------
class DataResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful response body."""

    data: T
    status_code: int = Field(..., description="HTTP status code of the response")


# ---------- ERRORS ----------
class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Error type or code")
    detail: str = Field(..., description="Human-readable error description")
    timestamp: datetime = Field(default_factory=_utcnow)


# ---------- SYSTEM ----------
class HealthResponse(BaseModel):
    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
