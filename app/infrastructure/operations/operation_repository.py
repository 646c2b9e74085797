"""
Adapter: Trading operation repository.

Implements OperationRepository port on the trading_operations table
and the tables that reference it (notifications,
ai_classification_logs).
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import bindparam, text
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from app.domain.operations.entities import TradingOperation
from app.domain.operations.ports import OperationRepository

logger = logging.getLogger(__name__)

DEPENDENT_TABLES = ("notifications", "ai_classification_logs")

_COLUMNS = """
    id, user_id, asset, operation_date, operation_time, contracts, costs,
    result, notes, raw_note, risk_level, strategy
"""

_INSERT = text(
    f"""
    INSERT INTO trading_operations
        (user_id, asset, operation_date, operation_time, contracts, costs,
         result, notes, raw_note, risk_level, strategy)
    VALUES
        (:user_id, :asset, :operation_date, :operation_time, :contracts, :costs,
         :result, :notes, :raw_note, :risk_level, :strategy)
    RETURNING {_COLUMNS}
    """
)


def _row_to_operation(row: RowMapping) -> TradingOperation:
    return TradingOperation(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        asset=row["asset"],
        operation_date=row["operation_date"],
        operation_time=row["operation_time"],
        contracts=int(row["contracts"] or 0),
        costs=Decimal(str(row["costs"] or 0)),
        result=Decimal(str(row["result"] or 0)),
        notes=row["notes"],
        raw_note=row["raw_note"],
        risk_level=row["risk_level"],
        strategy=row["strategy"],
    )


class OperationRepositoryAdapter(OperationRepository):
    """PostgreSQL implementation of the trading operation repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add_batch(self, operations: list[TradingOperation]) -> list[TradingOperation]:
        """Insert operations in one transaction.

        Returns:
            The stored operations, with ids assigned by the database.
        """
        inserted: list[TradingOperation] = []
        with self._engine.begin() as conn:
            for op in operations:
                row = conn.execute(
                    _INSERT,
                    {
                        "user_id": op.user_id,
                        "asset": op.asset,
                        "operation_date": op.operation_date,
                        "operation_time": op.operation_time,
                        "contracts": op.contracts,
                        "costs": op.costs,
                        "result": op.result,
                        "notes": op.notes,
                        "raw_note": op.raw_note,
                        "risk_level": op.risk_level,
                        "strategy": op.strategy,
                    },
                ).mappings().one()
                inserted.append(_row_to_operation(row))

        logger.info("Inserted %d trading operations.", len(inserted))
        return inserted

    def get_by_id(self, operation_id: str) -> Optional[TradingOperation]:
        query = text(f"SELECT {_COLUMNS} FROM trading_operations WHERE id = :id")
        with self._engine.connect() as conn:
            row = conn.execute(query, {"id": operation_id}).mappings().first()
        return _row_to_operation(row) if row is not None else None

    def get_unclassified(self, user_id: str, limit: int) -> list[TradingOperation]:
        query = text(
            f"""
            SELECT {_COLUMNS} FROM trading_operations
            WHERE user_id = :user_id AND (strategy IS NULL OR strategy = '')
            ORDER BY operation_date
            LIMIT :limit
            """
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query, {"user_id": user_id, "limit": limit}).mappings().all()
        return [_row_to_operation(row) for row in rows]

    def set_strategy(self, operation_id: str, strategy: str) -> None:
        query = text("UPDATE trading_operations SET strategy = :strategy WHERE id = :id")
        with self._engine.begin() as conn:
            conn.execute(query, {"id": operation_id, "strategy": strategy})

    def find_ids_by_strategy(self, strategy: str, limit: int) -> list[str]:
        query = text(
            """
            SELECT id FROM trading_operations
            WHERE lower(strategy) = lower(:strategy)
            LIMIT :limit
            """
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query, {"strategy": strategy, "limit": limit}).all()
        return [str(row[0]) for row in rows]

    def find_ids_by_dates(self, user_id: str, dates: list[date]) -> list[str]:
        query = text(
            """
            SELECT id FROM trading_operations
            WHERE user_id = :user_id AND operation_date IN :dates
            """
        ).bindparams(bindparam("dates", expanding=True))
        with self._engine.connect() as conn:
            rows = conn.execute(query, {"user_id": user_id, "dates": dates}).all()
        return [str(row[0]) for row in rows]

    def delete_dependents(self, operation_ids: list[str]) -> None:
        """Delete rows referencing the given operations.

        Each dependent table is cleaned in its own transaction. A failure
        on one table is logged and does not stop the next.
        """
        if not operation_ids:
            return
        for table in DEPENDENT_TABLES:
            query = text(
                f"DELETE FROM {table} WHERE operation_id IN :ids"
            ).bindparams(bindparam("ids", expanding=True))
            try:
                with self._engine.begin() as conn:
                    conn.execute(query, {"ids": operation_ids})
            except SQLAlchemyError as exc:
                logger.warning("Failed to delete %s for operations: %s", table, exc)

    def delete_by_ids(self, operation_ids: list[str]) -> int:
        if not operation_ids:
            return 0
        query = text(
            "DELETE FROM trading_operations WHERE id IN :ids"
        ).bindparams(bindparam("ids", expanding=True))
        with self._engine.begin() as conn:
            result = conn.execute(query, {"ids": operation_ids})
            return result.rowcount
