"""
Data Transfer Objects for the finances application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class ProcessRecurringCommand:
    """Input DTO for executing due recurring templates.

    Attributes:
        today: Reference calendar date. Defaults to the current date.
    """

    today: date | None = None


@dataclass(frozen=True)
class ProcessRecurringResult:
    """Output DTO summarizing one processor run.

    Attributes:
        processed: Templates that generated a new ledger transaction.
        skipped: Templates whose occurrence was already materialized.
        errors: One message per template that failed, naming its id.
    """

    processed: int
    skipped: int = 0
    errors: list[str] = field(default_factory=list)
