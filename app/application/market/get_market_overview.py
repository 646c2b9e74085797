"""
Use case: Quote overview of Ibovespa, S&P 500 and the US dollar.

Input: None
Output: MarketOverviewResult
Side effects: None.
Failure cases: Never raises; a failing provider yields a zero quote.

Ibovespa and the S&P 500 are tracked through the BOVA11 and IVVB11
exchange-traded funds.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from app.application.market.dtos import MarketOverviewResult, QuoteResult
from app.domain.market.entities import EMPTY_QUOTE, QuoteSnapshot
from app.domain.market.ports import QuoteSourcePort

logger = logging.getLogger(__name__)

IBOVESPA_TICKER = "BOVA11"
SP500_TICKER = "IVVB11"
DOLLAR_PAIR = "USD-BRL"


def _to_result(quote: QuoteSnapshot) -> QuoteResult:
    return QuoteResult(
        value=quote.value,
        change=quote.change,
        formatted=quote.formatted,
        is_positive=quote.is_positive,
    )


class GetMarketOverviewUseCase:
    def __init__(self, quote_port: QuoteSourcePort) -> None:
        self._quote_port = quote_port

    def execute(self) -> MarketOverviewResult:
        ibovespa = self._safe(IBOVESPA_TICKER, self._quote_port.stock_quote)
        sp500 = self._safe(SP500_TICKER, self._quote_port.stock_quote)
        dolar = self._safe(DOLLAR_PAIR, self._quote_port.currency_quote)

        return MarketOverviewResult(
            ibovespa=_to_result(ibovespa),
            dolar=_to_result(dolar),
            sp500=_to_result(sp500),
            last_update=datetime.now(timezone.utc),
        )

    @staticmethod
    def _safe(symbol: str, fetch: Callable[[str], QuoteSnapshot]) -> QuoteSnapshot:
        try:
            return fetch(symbol)
        except Exception as exc:
            logger.warning("Quote for %s unavailable: %s", symbol, exc)
            return EMPTY_QUOTE
