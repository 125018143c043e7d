"""Reference data endpoints: the asset catalog and supported currencies."""

from fastapi import APIRouter, Depends

from networth.api.deps import get_market_data_service, get_portfolio_service
from networth.api.schemas import AssetResponse, CurrenciesResponse
from networth.services import MarketDataService, PortfolioService

router = APIRouter(tags=["catalog"])


@router.get("/assets", response_model=list[AssetResponse])
def list_assets(
    market: MarketDataService = Depends(get_market_data_service),
) -> list[AssetResponse]:
    """Every asset that can be added to a portfolio, ordered by name."""
    return [AssetResponse.from_asset(a) for a in market.list_assets()]


@router.get("/currencies", response_model=CurrenciesResponse)
def list_currencies(
    service: PortfolioService = Depends(get_portfolio_service),
) -> CurrenciesResponse:
    """Currency codes accepted as a base currency."""
    return CurrenciesResponse(currencies=service.get_available_currencies())
