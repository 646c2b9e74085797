"""
Domain entities for the operations bounded context.

They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from enum import Enum
from typing import Optional

RAW_NOTE_MAX_LEN = 500


class RiskLevel(Enum):
    MEDIUM = "MEDIO"
    HIGH = "ALTO"


class Side(Enum):
    BUY = "C"
    SELL = "V"


@dataclass(frozen=True)
class TradingOperation:
    """A single journaled trade."""

    user_id: str
    asset: str
    operation_date: date
    result: Decimal
    contracts: int = 1
    costs: Decimal = Decimal("0")
    operation_time: Optional[time] = None
    notes: Optional[str] = None
    raw_note: Optional[str] = None
    risk_level: Optional[str] = None
    strategy: Optional[str] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class OperationDraft:
    """An operation extracted from a brokerage note, not yet persisted."""

    ticker: str
    type: Side
    qty: int
    price: Decimal
    result: Decimal
    date: date
    time: time
    broker: str
    costs: Decimal
    risk_level: RiskLevel
    notes: str


@dataclass(frozen=True)
class StrategyClassification:
    """A strategy assigned to an operation by the AI model."""

    operation_id: str
    user_id: str
    strategy: str
    confidence: Decimal
    model_used: str
