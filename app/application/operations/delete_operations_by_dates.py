"""
Use case: Delete a user's operations on the given trade dates.

Input: DeleteOperationsByDatesCommand (user_id, dates)
Output: DeleteOperationsResult (deleted)
Side effects: Deletes dependent notifications and classification logs,
    then the operations, in batches of ID_BATCH_SIZE ids.
Failure cases:
    - Missing user or dates: InvalidRequestError.
    - Dependent cleanup failures are logged as warnings.
    - An operations batch failure is raised.
"""

import logging

from app.application.operations.dtos import (
    DeleteOperationsByDatesCommand,
    DeleteOperationsResult,
)
from app.domain.errors import InvalidRequestError
from app.domain.operations.ports import OperationRepository

logger = logging.getLogger(__name__)

ID_BATCH_SIZE = 500


def _batches(ids: list[str], size: int) -> list[list[str]]:
    return [ids[i : i + size] for i in range(0, len(ids), size)]


class DeleteOperationsByDatesUseCase:
    def __init__(self, operation_repo: OperationRepository) -> None:
        self._operation_repo = operation_repo

    def execute(self, command: DeleteOperationsByDatesCommand) -> DeleteOperationsResult:
        if not command.dates:
            raise InvalidRequestError("dates array is required")
        if not command.user_id:
            raise InvalidRequestError("userId is required")

        ids = self._operation_repo.find_ids_by_dates(command.user_id, command.dates)
        if not ids:
            logger.info("No operations found for the requested dates")
            return DeleteOperationsResult(deleted=0)

        logger.info(
            "Deleting %d operations across %d dates", len(ids), len(command.dates)
        )
        batches = _batches(ids, ID_BATCH_SIZE)

        for index, batch in enumerate(batches):
            try:
                self._operation_repo.delete_dependents(batch)
            except Exception as exc:
                logger.warning(
                    "Failed to delete dependents of batch %d: %s", index, exc
                )

        deleted = 0
        for batch in batches:
            deleted += self._operation_repo.delete_by_ids(batch)
            logger.info("Deleted %d of %d operations", deleted, len(ids))

        return DeleteOperationsResult(deleted=deleted)
