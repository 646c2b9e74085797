"""
Use case: Latest central-bank economic indicators.

Input: None
Output: EconomicIndicatorsResult (Selic, IPCA, CDI)
Side effects: None.
Failure cases: Never raises; an indicator whose fetch fails is
    replaced by its built-in fallback reading.
"""

import logging

from app.application.market.dtos import EconomicIndicatorsResult, IndicatorResult
from app.domain.market.entities import FALLBACK_READINGS, Indicator
from app.domain.market.ports import IndicatorSourcePort

logger = logging.getLogger(__name__)


class GetEconomicIndicatorsUseCase:
    def __init__(self, indicator_port: IndicatorSourcePort) -> None:
        self._indicator_port = indicator_port

    def execute(self) -> EconomicIndicatorsResult:
        return EconomicIndicatorsResult(
            selic=self._reading(Indicator.SELIC),
            ipca=self._reading(Indicator.IPCA),
            cdi=self._reading(Indicator.CDI),
        )

    def _reading(self, indicator: Indicator) -> IndicatorResult:
        fallback = False
        try:
            reading = self._indicator_port.latest(indicator)
        except Exception as exc:
            logger.warning(
                "Using fallback for %s: %s", indicator.name, exc
            )
            reading = FALLBACK_READINGS[indicator]
            fallback = True
        return IndicatorResult(
            value=reading.value,
            date=reading.date,
            formatted=reading.formatted,
            fallback=fallback,
        )
