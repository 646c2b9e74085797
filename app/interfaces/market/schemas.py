"""
Pydantic schemas for the market API.
"""

from datetime import datetime

from pydantic import BaseModel


class IndicatorItem(BaseModel):
    """Latest published value of one indicator.

    Attributes:
        value: Percentage value.
        date: Reference date as published (DD/MM/YYYY).
        formatted: Display string, e.g. "15.00%".
        fallback: True when the source was unavailable.
    """

    value: float
    date: str
    formatted: str
    fallback: bool = False


class EconomicIndicatorsResponse(BaseModel):
    success: bool = True
    selic: IndicatorItem
    ipca: IndicatorItem
    cdi: IndicatorItem


class QuoteItem(BaseModel):
    value: float
    change: float
    formatted: str
    is_positive: bool


class MarketOverviewResponse(BaseModel):
    """Quote overview; a failing provider shows as a zero quote."""

    success: bool = True
    ibovespa: QuoteItem
    dolar: QuoteItem
    sp500: QuoteItem
    last_update: datetime
