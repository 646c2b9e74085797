"""
Use case: Classify every unclassified operation of a user.

Input: BulkClassifyCommand (user_id, limit)
Output: BulkClassifyResult (total, classified, failed, errors)
Side effects: Same as ClassifyStrategyUseCase, once per operation.
Failure cases: Per-operation failures are counted and never abort the loop.

Operations are classified one at a time with a fixed pause between
calls so the AI gateway is not flooded.
"""

import logging
import time
from typing import Callable

from app.application.operations.classify_strategy import ClassifyStrategyUseCase
from app.application.operations.dtos import (
    BulkClassifyCommand,
    BulkClassifyResult,
    ClassifyStrategyCommand,
)
from app.domain.errors import InvalidRequestError
from app.domain.operations.ports import OperationRepository

logger = logging.getLogger(__name__)


class BulkClassifyStrategiesUseCase:
    def __init__(
        self,
        operation_repo: OperationRepository,
        classify_use_case: ClassifyStrategyUseCase,
        delay_seconds: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._operation_repo = operation_repo
        self._classify_use_case = classify_use_case
        self._delay_seconds = delay_seconds
        self._sleep = sleep

    def execute(self, command: BulkClassifyCommand) -> BulkClassifyResult:
        if not command.user_id:
            raise InvalidRequestError("userId is required")

        operations = self._operation_repo.get_unclassified(
            command.user_id, limit=command.limit
        )
        logger.info(
            "Bulk classifying %d operations for user %s",
            len(operations),
            command.user_id,
        )

        classified = 0
        failed = 0
        errors: list[str] = []
        for index, op in enumerate(operations):
            if index > 0 and self._delay_seconds > 0:
                self._sleep(self._delay_seconds)
            try:
                result = self._classify_use_case.execute(
                    ClassifyStrategyCommand(
                        operation_id=op.id,
                        asset=op.asset,
                        result=op.result,
                        contracts=op.contracts,
                        costs=op.costs,
                        notes=op.notes,
                    )
                )
            except Exception as exc:
                logger.exception("Failed to classify operation %s", op.id)
                failed += 1
                errors.append(f"{op.id}: {exc}")
                continue

            if result.success:
                classified += 1
            else:
                failed += 1
                errors.append(f"{op.id}: {result.error}")

        logger.info(
            "Bulk classification finished: %d classified, %d failed",
            classified,
            failed,
        )
        return BulkClassifyResult(
            total=len(operations),
            classified=classified,
            failed=failed,
            errors=errors,
        )
