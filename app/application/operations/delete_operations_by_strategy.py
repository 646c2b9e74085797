"""
Use case: Delete every operation tagged with a given strategy.

Input: DeleteOperationsByStrategyCommand (strategy)
Output: DeleteOperationsResult (deleted)
Side effects: Deletes matching operations and their dependent rows.
Failure cases:
    - Blank strategy: InvalidRequestError.
    - A failing batch is logged; after MAX_CONSECUTIVE_FAILURES failures
      in a row the sweep stops and reports what was deleted so far.
"""

import logging

from app.application.operations.dtos import (
    DeleteOperationsByStrategyCommand,
    DeleteOperationsResult,
)
from app.domain.errors import InvalidRequestError
from app.domain.operations.ports import OperationRepository

logger = logging.getLogger(__name__)

BATCH_SIZE = 100
MAX_CONSECUTIVE_FAILURES = 3


class DeleteOperationsByStrategyUseCase:
    """Removes a strategy's operations in small batches."""

    def __init__(self, operation_repo: OperationRepository) -> None:
        self._operation_repo = operation_repo

    def execute(
        self, command: DeleteOperationsByStrategyCommand
    ) -> DeleteOperationsResult:
        strategy = (command.strategy or "").strip()
        if not strategy:
            raise InvalidRequestError("Strategy is required")

        deleted = 0
        failures = 0
        while failures < MAX_CONSECUTIVE_FAILURES:
            ids = self._operation_repo.find_ids_by_strategy(strategy, limit=BATCH_SIZE)
            if not ids:
                break
            try:
                self._operation_repo.delete_dependents(ids)
                removed = self._operation_repo.delete_by_ids(ids)
            except Exception:
                failures += 1
                logger.exception(
                    "Failed to delete a batch of %d operations (attempt %d)",
                    len(ids),
                    failures,
                )
                continue
            if removed == 0:
                failures += 1
                logger.warning("Batch delete removed no rows for strategy=%s", strategy)
                continue

            failures = 0
            deleted += removed
            logger.info("Deleted %d operations so far for strategy=%s", deleted, strategy)

        if failures >= MAX_CONSECUTIVE_FAILURES:
            logger.error(
                "Gave up deleting operations for strategy=%s after %d failures",
                strategy,
                failures,
            )
        return DeleteOperationsResult(deleted=deleted)
