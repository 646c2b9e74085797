"""
Dependency injection for the finances bounded context.

Wires the SQL adapters into use cases via constructor injection.
"""

from app.application.finances.process_recurring import ProcessRecurringUseCase
from app.infrastructure.database import get_engine
from app.infrastructure.finances.ledger_repository import LedgerRepositoryAdapter
from app.infrastructure.finances.notification_repository import (
    NotificationRepositoryAdapter,
)
from app.infrastructure.finances.recurring_transaction_repository import (
    RecurringTransactionRepositoryAdapter,
)


def get_process_recurring_use_case() -> ProcessRecurringUseCase:
    """Build ProcessRecurringUseCase with its infrastructure dependencies."""
    engine = get_engine()
    return ProcessRecurringUseCase(
        recurring_repo=RecurringTransactionRepositoryAdapter(engine=engine),
        ledger_repo=LedgerRepositoryAdapter(engine=engine),
        notification_repo=NotificationRepositoryAdapter(engine=engine),
    )
