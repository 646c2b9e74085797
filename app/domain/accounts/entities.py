"""
Domain entities for the accounts bounded context.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class AccessStatus(Enum):
    """Access state of a profile."""

    PENDING = "pendente"
    APPROVED = "aprovado"
    BLOCKED = "bloqueado"


class MessagePriority(Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


@dataclass(frozen=True)
class ExpiredTrial:
    """An approved profile whose trial period is over."""

    id: str
    full_name: Optional[str]
    email: Optional[str]
    trial_expires_at: datetime


@dataclass(frozen=True)
class Message:
    """A message shown in a user's inbox, or to everyone when global."""

    user_id: Optional[str]
    title: str
    content: str
    priority: MessagePriority = MessagePriority.NORMAL
    is_global: bool = False
