"""
Use case: Classify the strategy of a single trading operation.

Input: ClassifyStrategyCommand (operation fields)
Output: ClassifyStrategyResult (strategy + confidence, or success=False)
Side effects: Logs the classification and updates the operation's strategy.
Failure cases:
    - OperationNotFoundError if the operation does not exist.
    - AIGatewayError if the gateway fails.
    - An unusable model reply returns success=False, nothing is stored.
    - Failing to write the classification log is logged, not raised.
"""

import logging

from app.application.operations.dtos import (
    ClassifyStrategyCommand,
    ClassifyStrategyResult,
)
from app.domain.operations.entities import StrategyClassification
from app.domain.operations.errors import OperationNotFoundError
from app.domain.operations.ports import (
    ChatCompletionPort,
    ClassificationLogRepository,
    OperationRepository,
)
from app.domain.operations.strategy import (
    DEFAULT_CONFIDENCE,
    SYSTEM_PROMPT,
    clean_strategy,
    operation_prompt,
)

logger = logging.getLogger(__name__)

CLASSIFY_TEMPERATURE = 0.3
CLASSIFY_MAX_TOKENS = 50
UNCLASSIFIABLE = "Could not classify this operation"


class ClassifyStrategyUseCase:
    """Asks the AI model for the strategy behind an operation."""

    def __init__(
        self,
        operation_repo: OperationRepository,
        log_repo: ClassificationLogRepository,
        chat_port: ChatCompletionPort,
    ) -> None:
        self._operation_repo = operation_repo
        self._log_repo = log_repo
        self._chat_port = chat_port

    def execute(self, command: ClassifyStrategyCommand) -> ClassifyStrategyResult:
        operation = self._operation_repo.get_by_id(command.operation_id)
        if operation is None:
            raise OperationNotFoundError(command.operation_id)

        reply = self._chat_port.complete(
            system_prompt=SYSTEM_PROMPT,
            user_prompt=operation_prompt(
                asset=command.asset,
                result=command.result,
                contracts=command.contracts,
                costs=command.costs,
                notes=command.notes,
            ),
            temperature=CLASSIFY_TEMPERATURE,
            max_tokens=CLASSIFY_MAX_TOKENS,
        )
        strategy = clean_strategy(reply)
        if strategy is None:
            logger.info("Model reply for operation %s is not a strategy", command.operation_id)
            return ClassifyStrategyResult(success=False, error=UNCLASSIFIABLE)

        try:
            self._log_repo.save(
                StrategyClassification(
                    operation_id=command.operation_id,
                    user_id=operation.user_id,
                    strategy=strategy,
                    confidence=DEFAULT_CONFIDENCE,
                    model_used=self._chat_port.model,
                )
            )
        except Exception as exc:
            logger.warning("Failed to save classification log: %s", exc)

        self._operation_repo.set_strategy(command.operation_id, strategy)
        logger.info("Operation %s classified as %s", command.operation_id, strategy)
        return ClassifyStrategyResult(
            success=True, strategy=strategy, confidence=DEFAULT_CONFIDENCE
        )
