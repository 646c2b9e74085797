"""
Dependency injection for the market bounded context.
"""

from app.application.market.get_economic_indicators import (
    GetEconomicIndicatorsUseCase,
)
from app.application.market.get_market_overview import GetMarketOverviewUseCase
from app.core.config import settings
from app.infrastructure.market.bcb_indicator_adapter import BcbIndicatorAdapter
from app.infrastructure.market.quote_adapter import QuoteAdapter


def get_economic_indicators_use_case() -> GetEconomicIndicatorsUseCase:
    """Build GetEconomicIndicatorsUseCase with the BCB adapter."""
    return GetEconomicIndicatorsUseCase(
        indicator_port=BcbIndicatorAdapter(
            base_url=settings.bcb_base_url,
            timeout=settings.http_timeout_seconds,
        ),
    )


def get_market_overview_use_case() -> GetMarketOverviewUseCase:
    """Build GetMarketOverviewUseCase with the quote adapter."""
    return GetMarketOverviewUseCase(
        quote_port=QuoteAdapter(
            brapi_base_url=settings.brapi_base_url,
            awesomeapi_base_url=settings.awesomeapi_base_url,
            timeout=settings.http_timeout_seconds,
        ),
    )
