"""
FastAPI router for the market bounded context.

Both routes always answer 200: upstream failures are absorbed by the
use cases into fallback values.
"""

from fastapi import APIRouter, Depends

from app.application.market.dtos import IndicatorResult, QuoteResult
from app.application.market.get_economic_indicators import (
    GetEconomicIndicatorsUseCase,
)
from app.application.market.get_market_overview import GetMarketOverviewUseCase
from app.interfaces.market.dependencies import (
    get_economic_indicators_use_case,
    get_market_overview_use_case,
)
from app.interfaces.market.schemas import (
    EconomicIndicatorsResponse,
    IndicatorItem,
    MarketOverviewResponse,
    QuoteItem,
)

router = APIRouter(prefix="/market", tags=["market"])


def _indicator_item(r: IndicatorResult) -> IndicatorItem:
    return IndicatorItem(value=r.value, date=r.date, formatted=r.formatted, fallback=r.fallback)


def _quote_item(r: QuoteResult) -> QuoteItem:
    return QuoteItem(
        value=r.value, change=r.change, formatted=r.formatted, is_positive=r.is_positive
    )


@router.get(
    "/indicators",
    response_model=EconomicIndicatorsResponse,
    summary="Economic indicators",
    description="Latest Selic, IPCA and CDI values published by the central bank.",
)
def get_economic_indicators(
    use_case: GetEconomicIndicatorsUseCase = Depends(get_economic_indicators_use_case),
) -> EconomicIndicatorsResponse:
    result = use_case.execute()
    return EconomicIndicatorsResponse(
        selic=_indicator_item(result.selic),
        ipca=_indicator_item(result.ipca),
        cdi=_indicator_item(result.cdi),
    )


@router.get(
    "/overview",
    response_model=MarketOverviewResponse,
    summary="Market overview",
    description="Ibovespa, S&P 500 (via BOVA11 and IVVB11) and USD-BRL quotes.",
)
def get_market_overview(
    use_case: GetMarketOverviewUseCase = Depends(get_market_overview_use_case),
) -> MarketOverviewResponse:
    result = use_case.execute()
    return MarketOverviewResponse(
        ibovespa=_quote_item(result.ibovespa),
        dolar=_quote_item(result.dolar),
        sp500=_quote_item(result.sp500),
        last_update=result.last_update,
    )
