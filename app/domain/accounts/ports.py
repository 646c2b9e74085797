"""
Port interfaces (ABCs) for the accounts bounded context.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from app.domain.accounts.entities import AccessStatus, ExpiredTrial, Message


class ProfileRepository(ABC):
    """Port for profile access management."""

    @abstractmethod
    def get_expired_trials(self, now: datetime) -> list[ExpiredTrial]:
        """Return approved profiles whose trial_expires_at is before `now`."""
        raise NotImplementedError

    @abstractmethod
    def set_access_status(
        self, user_ids: list[str], status: AccessStatus, clear_trial: bool = False
    ) -> None:
        """Change the access status of several profiles at once."""
        raise NotImplementedError


class MessageRepository(ABC):
    """Port for delivering inbox messages."""

    @abstractmethod
    def send(self, message: Message) -> None:
        raise NotImplementedError

    @abstractmethod
    def send_batch(self, messages: list[Message]) -> None:
        raise NotImplementedError
