"""
Domain entities for the market bounded context.
"""

from dataclasses import dataclass
from enum import Enum


class Indicator(Enum):
    """Central-bank series tracked by the dashboard, valued by SGS series id."""

    SELIC = 432
    IPCA = 433
    CDI = 12


@dataclass(frozen=True)
class IndicatorReading:
    """Latest published value of an indicator series."""

    value: float
    date: str

    @property
    def formatted(self) -> str:
        return f"{self.value:.2f}%"


@dataclass(frozen=True)
class QuoteSnapshot:
    """Last price and daily percent change of a market reference."""

    value: float
    change: float

    @property
    def is_positive(self) -> bool:
        return self.change > 0

    @property
    def formatted(self) -> str:
        arrow = "▲" if self.is_positive else "▼"
        return f"{arrow} {abs(self.change):.2f}%"


# Published when the central bank API is unavailable
FALLBACK_READINGS: dict[Indicator, IndicatorReading] = {
    Indicator.SELIC: IndicatorReading(value=15.0, date="10/12/2025"),
    Indicator.IPCA: IndicatorReading(value=0.09, date="01/10/2025"),
    Indicator.CDI: IndicatorReading(value=0.055131, date="17/11/2025"),
}

EMPTY_QUOTE = QuoteSnapshot(value=0.0, change=0.0)
