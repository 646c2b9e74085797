"""
Use case: Persist operations reviewed after a brokerage note import.

Input: ConfirmImportCommand (user_id, operations, raw_note)
Output: ConfirmImportResult (inserted operations, count)
Side effects: Inserts trading operations with no strategy assigned.
Failure cases: EmptyImportError, InvalidRequestError (missing user).
"""

import logging

from app.application.operations.dtos import (
    ConfirmImportCommand,
    ConfirmImportResult,
    OperationResult,
)
from app.domain.errors import InvalidRequestError
from app.domain.operations.entities import RAW_NOTE_MAX_LEN, TradingOperation
from app.domain.operations.errors import EmptyImportError
from app.domain.operations.ports import OperationRepository

logger = logging.getLogger(__name__)


def to_operation_result(op: TradingOperation) -> OperationResult:
    return OperationResult(
        id=op.id,
        user_id=op.user_id,
        asset=op.asset,
        operation_date=op.operation_date,
        operation_time=op.operation_time,
        contracts=op.contracts,
        costs=op.costs,
        result=op.result,
        notes=op.notes,
        risk_level=op.risk_level,
        strategy=op.strategy,
    )


class ConfirmImportUseCase:
    """Stores previewed operations in the user's journal."""

    def __init__(self, operation_repo: OperationRepository) -> None:
        self._operation_repo = operation_repo

    def execute(self, command: ConfirmImportCommand) -> ConfirmImportResult:
        """Insert the confirmed operations.

        Raises:
            EmptyImportError: If no operations were sent.
            InvalidRequestError: If the user id is blank.
        """
        if not command.operations:
            raise EmptyImportError()
        if not command.user_id:
            raise InvalidRequestError("userId is required")

        raw_note = command.raw_note[:RAW_NOTE_MAX_LEN] if command.raw_note else None
        to_insert = [
            TradingOperation(
                user_id=command.user_id,
                asset=op.ticker,
                operation_date=op.date,
                operation_time=op.time,
                contracts=op.qty,
                costs=op.costs,
                result=op.result,
                notes=op.notes,
                raw_note=raw_note,
                risk_level=op.risk_level,
                strategy=None,
            )
            for op in command.operations
        ]

        inserted = self._operation_repo.add_batch(to_insert)
        logger.info("Confirmed %d imported operations", len(inserted))
        return ConfirmImportResult(
            operations=[to_operation_result(op) for op in inserted],
            count=len(inserted),
        )
