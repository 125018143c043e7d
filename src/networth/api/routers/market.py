"""Market data endpoints: single price and FX rate lookups."""

from fastapi import APIRouter, Depends, Query

from networth.api.deps import get_market_data_service
from networth.api.schemas import PriceResponse, RateResponse
from networth.core.exceptions import ValidationError
from networth.core.money import normalize_currency
from networth.services import MarketDataService

router = APIRouter(prefix="/market", tags=["market"])


@router.get("/price/{ticker}", response_model=PriceResponse)
def get_price(
    ticker: str,
    market: MarketDataService = Depends(get_market_data_service),
) -> PriceResponse:
    """Current price for a ticker in its native currency (cached for a few seconds)."""
    symbol = ticker.strip().upper()
    return PriceResponse(ticker=symbol, price=market.get_price(symbol))


@router.get("/rate", response_model=RateResponse)
def get_rate(
    from_currency: str = Query(..., description="Source ISO 4217 code"),
    to_currency: str = Query(..., description="Target ISO 4217 code"),
    market: MarketDataService = Depends(get_market_data_service),
) -> RateResponse:
    """Exchange rate such that amount_in_to = amount_in_from * rate."""
    try:
        source = normalize_currency(from_currency)
        target = normalize_currency(to_currency)
    except ValueError as exc:
        raise ValidationError(str(exc))
    return RateResponse(
        from_currency=source,
        to_currency=target,
        rate=market.get_rate(source, target),
    )
