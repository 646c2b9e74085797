"""
Adapter: Central bank (BCB) SGS time-series API.

Implements IndicatorSourcePort. Each series answers with an array of
`{"data": "DD/MM/YYYY", "valor": "<number>"}` objects; only the last
point is requested.
"""

import logging
from typing import Optional

import httpx

from app.domain.errors import ExternalServiceError
from app.domain.market.entities import Indicator, IndicatorReading
from app.domain.market.ports import IndicatorSourcePort

logger = logging.getLogger(__name__)

SERVICE_NAME = "BCB"


class BcbIndicatorAdapter(IndicatorSourcePort):
    """Fetches the latest value of a BCB series."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def latest(self, indicator: Indicator) -> IndicatorReading:
        url = f"{self._base_url}/bcdata.sgs.{indicator.value}/dados/ultimos/1"
        logger.info("Fetching %s from %s", indicator.name, url)

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                resp = client.get(
                    url,
                    params={"formato": "json"},
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as exc:
            raise ExternalServiceError(SERVICE_NAME, str(exc)) from exc

        if resp.is_error:
            raise ExternalServiceError(SERVICE_NAME, f"HTTP {resp.status_code}")
        if "application/json" not in resp.headers.get("content-type", ""):
            raise ExternalServiceError(SERVICE_NAME, "non-JSON response")

        try:
            points = resp.json()
            point = points[0]
            value = float(point.get("valor") or 0)
        except (ValueError, IndexError, KeyError, TypeError, AttributeError) as exc:
            raise ExternalServiceError(SERVICE_NAME, "empty or malformed series") from exc

        return IndicatorReading(value=value, date=point.get("data") or "")
