"""
Port interfaces (ABCs) for the market bounded context.
"""

from abc import ABC, abstractmethod

from app.domain.market.entities import Indicator, IndicatorReading, QuoteSnapshot


class IndicatorSourcePort(ABC):
    """Port for the central-bank time-series API."""

    @abstractmethod
    def latest(self, indicator: Indicator) -> IndicatorReading:
        """Return the most recent point of the series.

        Raises:
            ExternalServiceError: If the API fails or returns no data.
        """
        raise NotImplementedError


class QuoteSourcePort(ABC):
    """Port for equity and currency quote providers."""

    @abstractmethod
    def stock_quote(self, ticker: str) -> QuoteSnapshot:
        """Return the quote of an exchange-listed ticker.

        Raises:
            ExternalServiceError: If the provider fails.
        """
        raise NotImplementedError

    @abstractmethod
    def currency_quote(self, pair: str) -> QuoteSnapshot:
        """Return the quote of a currency pair such as 'USD-BRL'.

        Raises:
            ExternalServiceError: If the provider fails.
        """
        raise NotImplementedError
