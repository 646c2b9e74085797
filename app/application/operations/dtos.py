"""
Data Transfer Objects for the operations application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
import datetime as dt
from datetime import date, time
from decimal import Decimal


# ------------------------------------------------------------------
# Import DTOs
# ------------------------------------------------------------------


@dataclass(frozen=True)
class ImportedOperation:
    """One reviewed operation sent back by the client for persistence.

    Attributes:
        ticker: Traded asset code.
        date: Trade date.
        result: Net result after costs.
    """

    ticker: str
    date: date
    result: Decimal
    qty: int = 1
    costs: Decimal = Decimal("0")
    time: dt.time | None = None
    notes: str | None = None
    risk_level: str | None = None


@dataclass(frozen=True)
class ConfirmImportCommand:
    user_id: str
    operations: list[ImportedOperation]
    raw_note: str | None = None


@dataclass(frozen=True)
class OperationResult:
    """Output DTO for a persisted operation."""

    id: str | None
    user_id: str
    asset: str
    operation_date: date
    operation_time: time | None
    contracts: int
    costs: Decimal
    result: Decimal
    notes: str | None
    risk_level: str | None
    strategy: str | None


@dataclass(frozen=True)
class ConfirmImportResult:
    operations: list[OperationResult]
    count: int


@dataclass(frozen=True)
class ParseBrokerageNoteCommand:
    """Input DTO with the text content of a brokerage note."""

    file_content: str


@dataclass(frozen=True)
class OperationDraftResult:
    ticker: str
    type: str
    qty: int
    price: Decimal
    result: Decimal
    date: date
    time: time
    broker: str
    costs: Decimal
    risk_level: str
    notes: str


@dataclass(frozen=True)
class BrokerageNoteResult:
    """Output DTO for a parsed note. Nothing has been persisted."""

    broker: str
    operations: list[OperationDraftResult]
    count: int


# ------------------------------------------------------------------
# Deletion DTOs
# ------------------------------------------------------------------


@dataclass(frozen=True)
class DeleteOperationsByStrategyCommand:
    strategy: str


@dataclass(frozen=True)
class DeleteOperationsByDatesCommand:
    user_id: str
    dates: list[date]


@dataclass(frozen=True)
class DeleteOperationsResult:
    deleted: int


# ------------------------------------------------------------------
# Classification DTOs
# ------------------------------------------------------------------


@dataclass(frozen=True)
class ClassifyStrategyCommand:
    """Input DTO describing the operation to classify.

    Attributes:
        operation_id: Id of the stored operation.
        asset: Traded asset code.
        result: Net result.
        contracts: Number of contracts.
        costs: Total costs.
        notes: Free-text trader notes.
    """

    operation_id: str
    asset: str
    result: Decimal
    contracts: int = 1
    costs: Decimal = Decimal("0")
    notes: str | None = None


@dataclass(frozen=True)
class ClassifyStrategyResult:
    success: bool
    strategy: str | None = None
    confidence: Decimal | None = None
    error: str | None = None


@dataclass(frozen=True)
class BulkClassifyCommand:
    user_id: str
    limit: int = 100


@dataclass(frozen=True)
class BulkClassifyResult:
    total: int
    classified: int
    failed: int
    errors: list[str] = field(default_factory=list)
