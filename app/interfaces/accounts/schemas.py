"""
Pydantic schemas for the accounts API.
"""

from pydantic import BaseModel


class BlockedUserItem(BaseModel):
    id: str
    name: str | None = None
    email: str | None = None


class ExpireTrialsResponse(BaseModel):
    """Response schema for the trial expiration sweep."""

    success: bool = True
    message: str
    blocked: int
    users: list[BlockedUserItem]
