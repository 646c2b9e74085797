"""
Adapter: Ledger repository.

Implements LedgerRepository port.
Inserts generated rows into the personal_finances table. The unique
index on (recurring_id, transaction_date) makes a repeated insert of
the same occurrence a no-op.
"""

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.domain.finances.entities import GeneratedTransaction
from app.domain.finances.ports import LedgerRepository

_INSERT_GENERATED = text(
    """
    INSERT INTO personal_finances
        (user_id, recurring_id, title, amount, type, category,
         account_id, description, tags, transaction_date)
    VALUES
        (:user_id, :recurring_id, :title, :amount, :type, :category,
         :account_id, :description, :tags, :transaction_date)
    ON CONFLICT (recurring_id, transaction_date) DO NOTHING
    """
)


class LedgerRepositoryAdapter(LedgerRepository):
    """PostgreSQL implementation of the ledger repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add_generated(self, transaction: GeneratedTransaction) -> bool:
        """Insert a generated transaction unless its occurrence exists.

        Args:
            transaction: The ledger row to insert.

        Returns:
            True if a row was inserted.
        """
        with self._engine.begin() as conn:
            result = conn.execute(
                _INSERT_GENERATED,
                {
                    "user_id": transaction.user_id,
                    "recurring_id": transaction.recurring_id,
                    "title": transaction.title,
                    "amount": transaction.amount,
                    "type": transaction.type.value,
                    "category": transaction.category,
                    "account_id": transaction.account_id,
                    "description": transaction.description,
                    "tags": transaction.tags,
                    "transaction_date": transaction.transaction_date,
                },
            )
            return result.rowcount == 1
