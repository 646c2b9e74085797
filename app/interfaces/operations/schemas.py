"""
Pydantic schemas for the trading operations API.

Request bodies accept the camelCase keys sent by the web client
(`userId`, `fileContent`, ...) as well as snake_case names.
Responses use snake_case.
"""

import datetime as dt
from datetime import date, time
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TICKER_MAX_LEN = 20
NOTE_MAX_LEN = 200_000


class _CamelRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ------------------------------------------------------------------
# Import
# ------------------------------------------------------------------


class ImportedOperationItem(_CamelRequest):
    """One reviewed operation to persist.

    Attributes:
        ticker: Traded asset code.
        date: Trade date.
        result: Net result after costs.
        qty: Contracts traded (at least 1).
        costs: Total costs.
        time: Execution time, if known.
        notes: Free-text notes.
        risk_level: "MEDIO" or "ALTO".
    """

    ticker: str = Field(..., min_length=1, max_length=TICKER_MAX_LEN)
    date: date
    result: Decimal
    qty: int = Field(1, ge=1)
    costs: Decimal = Decimal("0")
    time: dt.time | None = None
    notes: str | None = None
    risk_level: str | None = None


class ConfirmImportRequest(_CamelRequest):
    user_id: str
    operations: list[ImportedOperationItem]
    raw_note: str | None = None


class OperationItem(BaseModel):
    """A persisted trading operation."""

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


class ConfirmImportResponse(BaseModel):
    success: bool = True
    operations: list[OperationItem]
    count: int


class ParseBrokerageNoteRequest(_CamelRequest):
    """Text content of a brokerage note (PDF text or CSV)."""

    file_content: str = Field(..., max_length=NOTE_MAX_LEN)


class OperationDraftItem(BaseModel):
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


class BrokerageNoteResponse(BaseModel):
    """Operations extracted from a note. Nothing has been saved yet."""

    success: bool = True
    broker: str
    operations: list[OperationDraftItem]
    count: int


# ------------------------------------------------------------------
# Deletion
# ------------------------------------------------------------------


class DeleteByStrategyRequest(_CamelRequest):
    strategy: str


class DeleteByDatesRequest(_CamelRequest):
    user_id: str
    dates: list[date] = Field(..., min_length=1)


class DeleteOperationsResponse(BaseModel):
    success: bool = True
    deleted: int


# ------------------------------------------------------------------
# Classification
# ------------------------------------------------------------------


class ClassifyStrategyRequest(_CamelRequest):
    """Operation to classify, with the fields used in the prompt."""

    operation_id: str
    asset: str
    result: Decimal
    contracts: int = Field(1, ge=0)
    costs: Decimal = Decimal("0")
    notes: str | None = None


class ClassifyStrategyResponse(BaseModel):
    """Classification outcome.

    `success` is false when the model could not name a strategy; the
    operation is then left untouched.
    """

    success: bool
    strategy: str | None = None
    confidence: Decimal | None = None
    error: str | None = None


class BulkClassifyRequest(_CamelRequest):
    user_id: str
    limit: int = Field(100, ge=1, le=500)


class BulkClassifyResponse(BaseModel):
    success: bool = True
    total: int
    classified: int
    failed: int
    errors: list[str]
