"""
Adapter: Recurring transaction repository.

Implements RecurringTransactionRepository port.
Reads due templates from and advances them in the
recurring_transactions table.
"""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.engine import Engine, RowMapping

from app.domain.finances.entities import (
    Frequency,
    RecurringTransaction,
    TransactionType,
)
from app.domain.finances.ports import RecurringTransactionRepository

logger = logging.getLogger(__name__)

_SELECT_DUE = text(
    """
    SELECT id, user_id, title, amount, type, category, account_id,
           description, tags, frequency, day_of_month,
           next_execution_date, end_date, is_active
    FROM recurring_transactions
    WHERE is_active = true
      AND next_execution_date <= :today
      AND (end_date IS NULL OR next_execution_date <= end_date)
    ORDER BY next_execution_date
    """
)

_ADVANCE = text(
    """
    UPDATE recurring_transactions
    SET next_execution_date = :next_date, updated_at = now()
    WHERE id = :id AND next_execution_date = :expected
    """
)


def _row_to_template(row: RowMapping) -> RecurringTransaction:
    return RecurringTransaction(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        title=row["title"],
        amount=Decimal(str(row["amount"])),
        type=TransactionType(row["type"]),
        category=row["category"],
        frequency=Frequency(row["frequency"]),
        next_execution_date=row["next_execution_date"],
        account_id=str(row["account_id"]) if row["account_id"] else None,
        description=row["description"],
        tags=list(row["tags"]) if row["tags"] else None,
        day_of_month=row["day_of_month"],
        end_date=row["end_date"],
        is_active=bool(row["is_active"]),
    )


class RecurringTransactionRepositoryAdapter(RecurringTransactionRepository):
    """PostgreSQL implementation of the recurring template repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_due(self, today: date) -> list[RecurringTransaction]:
        """Return active templates due on or before `today`.

        Args:
            today: Reference calendar date.

        Returns:
            Templates ordered by next execution date ascending.
        """
        with self._engine.connect() as conn:
            rows = conn.execute(_SELECT_DUE, {"today": today}).mappings().all()

        templates = [_row_to_template(row) for row in rows]
        logger.info("Fetched %d due recurring templates.", len(templates))
        return templates

    def advance(self, recurring_id: str, expected: date, next_date: date) -> bool:
        """Compare-and-set the next execution date.

        Returns:
            True if the stored date still equaled `expected` and was moved.
        """
        with self._engine.begin() as conn:
            result = conn.execute(
                _ADVANCE,
                {"id": recurring_id, "expected": expected, "next_date": next_date},
            )
            return result.rowcount == 1
