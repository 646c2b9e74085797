"""
Pydantic schemas shared by every router.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    success: bool = False
    error: str
    detail: str | None = None


class HealthResponse(BaseModel):
    status: str
    version: str
