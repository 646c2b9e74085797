"""
Port interfaces (ABCs) for the finances bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from datetime import date

from app.domain.finances.entities import (
    GeneratedTransaction,
    Notification,
    RecurringTransaction,
)


class RecurringTransactionRepository(ABC):
    """Port for reading and advancing recurring templates."""

    @abstractmethod
    def get_due(self, today: date) -> list[RecurringTransaction]:
        """Return active templates whose next execution is on or before today
        and whose end date (if any) has not been passed."""
        raise NotImplementedError

    @abstractmethod
    def advance(
        self, recurring_id: str, expected: date, next_date: date
    ) -> bool:
        """Move a template's next execution date from `expected` to `next_date`.

        The update only applies while the stored date still equals
        `expected`.

        Returns:
            True if this call moved the date, False if another run already did.
        """
        raise NotImplementedError


class LedgerRepository(ABC):
    """Port for persisting ledger transactions."""

    @abstractmethod
    def add_generated(self, transaction: GeneratedTransaction) -> bool:
        """Insert a generated transaction.

        Returns:
            False if a row for the same (recurring_id, transaction_date)
            already exists and nothing was inserted.
        """
        raise NotImplementedError


class NotificationRepository(ABC):
    """Port for persisting in-app notifications."""

    @abstractmethod
    def add(self, notification: Notification) -> None:
        """Persist a single notification."""
        raise NotImplementedError
