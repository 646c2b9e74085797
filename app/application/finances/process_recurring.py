"""
Use case: Execute every recurring transaction template that is due.

Input: ProcessRecurringCommand (today)
Output: ProcessRecurringResult (processed, skipped, errors)
Side effects: Inserts ledger transactions and notifications, advances
    each template's next execution date.
Failure cases:
    - Individual template failures are logged and reported, not raised.
    - A template whose occurrence already exists in the ledger is
      skipped (its date is still advanced, no notification is sent).
"""

import logging
from datetime import date

from app.application.finances.dtos import (
    ProcessRecurringCommand,
    ProcessRecurringResult,
)
from app.domain.finances.entities import (
    GeneratedTransaction,
    Notification,
    RecurringTransaction,
)
from app.domain.finances.ports import (
    LedgerRepository,
    NotificationRepository,
    RecurringTransactionRepository,
)
from app.domain.finances.schedule import is_due, next_execution_date

logger = logging.getLogger(__name__)

NOTIFICATION_TYPE = "recurring_executed"
NOTIFICATION_TITLE = "Transação Recorrente Criada"


class ProcessRecurringUseCase:
    """Materializes due recurring templates into ledger transactions.

    Templates are independent: each one is inserted, advanced and
    notified on its own, and a failure in one never stops the others.
    """

    def __init__(
        self,
        recurring_repo: RecurringTransactionRepository,
        ledger_repo: LedgerRepository,
        notification_repo: NotificationRepository,
    ) -> None:
        self._recurring_repo = recurring_repo
        self._ledger_repo = ledger_repo
        self._notification_repo = notification_repo

    def execute(self, command: ProcessRecurringCommand) -> ProcessRecurringResult:
        """Run the recurring processor for a given day.

        Args:
            command: Carries the reference date.

        Returns:
            Counts of processed and skipped templates plus per-template errors.
        """
        today = command.today or date.today()
        templates = [
            t for t in self._recurring_repo.get_due(today) if is_due(t, today)
        ]
        logger.info(
            "Processing %d due recurring transactions for %s",
            len(templates),
            today.isoformat(),
        )

        processed = 0
        skipped = 0
        errors: list[str] = []

        for template in templates:
            try:
                if self._execute_one(template):
                    processed += 1
                else:
                    skipped += 1
            except Exception as exc:
                logger.exception(
                    "Failed to process recurring transaction %s", template.id
                )
                errors.append(
                    f"Failed to process recurring transaction {template.id}: {exc}"
                )

        logger.info(
            "Processed %d recurring transactions (%d skipped, %d failed)",
            processed,
            skipped,
            len(errors),
        )
        return ProcessRecurringResult(
            processed=processed, skipped=skipped, errors=errors
        )

    def _execute_one(self, template: RecurringTransaction) -> bool:
        """Materialize one occurrence. Returns False if it already existed."""
        next_date = next_execution_date(template)
        generated = GeneratedTransaction.from_template(template)
        inserted = self._ledger_repo.add_generated(generated)

        moved = self._recurring_repo.advance(
            template.id,
            expected=template.next_execution_date,
            next_date=next_date,
        )
        if not moved:
            logger.info(
                "Recurring transaction %s was already advanced by another run",
                template.id,
            )

        if not inserted:
            logger.info(
                "Occurrence %s of recurring transaction %s already exists",
                generated.transaction_date.isoformat(),
                template.id,
            )
            return False

        self._notification_repo.add(
            Notification(
                user_id=template.user_id,
                type=NOTIFICATION_TYPE,
                title=NOTIFICATION_TITLE,
                message=f"{template.title} - R$ {template.amount:.2f}",
            )
        )
        return True
