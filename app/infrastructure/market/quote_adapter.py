"""
Adapter: Equity and currency quote providers.

Implements QuoteSourcePort:
- brapi for exchange-listed tickers (`results[0]` object)
- AwesomeAPI for currency pairs (`{"USDBRL": {...}}`)

Providers disagree on field names, so price and change are read from
the first field present among several candidates. Non-numeric values
read as zero.
"""

import logging
import math
from typing import Any, Optional

import httpx

from app.domain.errors import ExternalServiceError
from app.domain.market.entities import QuoteSnapshot
from app.domain.market.ports import QuoteSourcePort

logger = logging.getLogger(__name__)

STOCK_PRICE_FIELDS = ("regularMarketPrice", "price", "bid")
STOCK_CHANGE_FIELDS = ("regularMarketChangePercent", "pctChange", "changePercent")
CURRENCY_PRICE_FIELDS = ("bid", "regularMarketPrice", "price")
CURRENCY_CHANGE_FIELDS = ("pctChange", "regularMarketChangePercent", "changePercent")


def first_number(data: dict[str, Any], fields: tuple[str, ...]) -> float:
    """Return the first present field as a float, or 0.0."""
    for name in fields:
        value = data.get(name)
        if value is None:
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 0.0
        return number if math.isfinite(number) else 0.0
    return 0.0


class QuoteAdapter(QuoteSourcePort):
    """Fetches quotes from brapi and AwesomeAPI."""

    def __init__(
        self,
        brapi_base_url: str,
        awesomeapi_base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._brapi_base_url = brapi_base_url.rstrip("/")
        self._awesomeapi_base_url = awesomeapi_base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _get_json(self, service: str, url: str, params: Optional[dict] = None) -> Any:
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                resp = client.get(url, params=params)
                resp.raise_for_status()
                return resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("%s request to %s failed: %s", service, url, exc)
            raise ExternalServiceError(service, str(exc)) from exc

    def stock_quote(self, ticker: str) -> QuoteSnapshot:
        data = self._get_json(
            "brapi",
            f"{self._brapi_base_url}/quote/{ticker}",
            params={"range": "1d", "interval": "1d"},
        )
        results = data.get("results") if isinstance(data, dict) else None
        quote = results[0] if results else {}
        return QuoteSnapshot(
            value=first_number(quote, STOCK_PRICE_FIELDS),
            change=first_number(quote, STOCK_CHANGE_FIELDS),
        )

    def currency_quote(self, pair: str) -> QuoteSnapshot:
        data = self._get_json("AwesomeAPI", f"{self._awesomeapi_base_url}/last/{pair}")
        key = pair.replace("-", "")
        quote = data.get(key, {}) if isinstance(data, dict) else {}
        return QuoteSnapshot(
            value=first_number(quote, CURRENCY_PRICE_FIELDS),
            change=first_number(quote, CURRENCY_CHANGE_FIELDS),
        )
