"""
Data Transfer Objects for the market application layer.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class IndicatorResult:
    """Latest value of one indicator.

    Attributes:
        value: Percentage value as published.
        date: Reference date as published by the central bank (DD/MM/YYYY).
        formatted: Value rendered with two decimals and a percent sign.
        fallback: True when the value is the built-in default.
    """

    value: float
    date: str
    formatted: str
    fallback: bool = False


@dataclass(frozen=True)
class EconomicIndicatorsResult:
    selic: IndicatorResult
    ipca: IndicatorResult
    cdi: IndicatorResult


@dataclass(frozen=True)
class QuoteResult:
    value: float
    change: float
    formatted: str
    is_positive: bool


@dataclass(frozen=True)
class MarketOverviewResult:
    ibovespa: QuoteResult
    dolar: QuoteResult
    sp500: QuoteResult
    last_update: datetime
