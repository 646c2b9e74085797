"""
Adapter: AI classification log repository.

Implements ClassificationLogRepository port on the
ai_classification_logs table.
"""

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.domain.operations.entities import StrategyClassification
from app.domain.operations.ports import ClassificationLogRepository

_INSERT = text(
    """
    INSERT INTO ai_classification_logs
        (operation_id, user_id, classified_strategy, confidence, model_used)
    VALUES
        (:operation_id, :user_id, :classified_strategy, :confidence, :model_used)
    """
)


class ClassificationLogRepositoryAdapter(ClassificationLogRepository):
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def save(self, classification: StrategyClassification) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                _INSERT,
                {
                    "operation_id": classification.operation_id,
                    "user_id": classification.user_id,
                    "classified_strategy": classification.strategy,
                    "confidence": classification.confidence,
                    "model_used": classification.model_used,
                },
            )
