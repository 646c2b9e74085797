"""
Domain entities for the finances bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(Enum):
    """Direction of a ledger entry."""

    INCOME = "income"
    EXPENSE = "expense"


class Frequency(Enum):
    """How often a recurring template fires."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class RecurringTransaction:
    """A user-defined rule describing a recurring income or expense.

    Attributes:
        next_execution_date: Calendar date of the next occurrence. Only
            ever moves forward.
        day_of_month: Anchor day (1-31) for monthly templates.
        end_date: Last date on which an occurrence may fall.
    """

    id: str
    user_id: str
    title: str
    amount: Decimal
    type: TransactionType
    category: str
    frequency: Frequency
    next_execution_date: date
    account_id: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    day_of_month: Optional[int] = None
    end_date: Optional[date] = None
    is_active: bool = True


@dataclass(frozen=True)
class GeneratedTransaction:
    """A ledger row materialized from one execution of a template.

    `recurring_id` and `transaction_date` together identify the
    execution, so the same occurrence is never stored twice.
    """

    recurring_id: str
    user_id: str
    title: str
    amount: Decimal
    type: TransactionType
    category: str
    transaction_date: date
    account_id: Optional[str] = None
    description: Optional[str] = None
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_template(cls, template: RecurringTransaction) -> "GeneratedTransaction":
        """Copy a template's fields into a ledger row dated at its next execution."""
        return cls(
            recurring_id=template.id,
            user_id=template.user_id,
            title=template.title,
            amount=template.amount,
            type=template.type,
            category=template.category,
            transaction_date=template.next_execution_date,
            account_id=template.account_id,
            description=template.description,
            tags=list(template.tags or []),
        )


@dataclass(frozen=True)
class Notification:
    """An in-app notification addressed to a single user."""

    user_id: str
    type: str
    title: str
    message: str
