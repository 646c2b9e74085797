"""
Data Transfer Objects for the accounts application layer.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class ExpireTrialsCommand:
    """Input DTO for the trial expiration sweep.

    Attributes:
        now: Reference instant. Defaults to the current UTC time.
    """

    now: datetime | None = None


@dataclass(frozen=True)
class BlockedUser:
    id: str
    name: str | None
    email: str | None


@dataclass(frozen=True)
class ExpireTrialsResult:
    blocked: int
    users: list[BlockedUser] = field(default_factory=list)
