"""Portfolio endpoints: valuation, refresh and holdings CRUD for the calling user."""

from fastapi import APIRouter, Depends, Response

from networth.api.deps import get_portfolio_service, get_user_id
from networth.api.schemas import (
    BaseCurrencyRequest,
    BaseCurrencyResponse,
    FinancialHealthResponse,
    HoldingResponse,
    InvestmentCreateRequest,
    InvestmentUpdateRequest,
    PortfolioResponse,
    RefreshResponse,
)
from networth.services import PortfolioService

router = APIRouter(tags=["portfolio"])


@router.get("/portfolio", response_model=PortfolioResponse)
def get_portfolio(
    user_id: str = Depends(get_user_id),
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioResponse:
    """
    Value the user's holdings in their base currency.

    Prices are refreshed first; tickers whose refresh fails keep their last
    known price. Currencies without a rate are listed in `warnings`.
    """
    return PortfolioResponse.from_report(service.get_portfolio(user_id))


@router.post("/portfolio", response_model=HoldingResponse, status_code=201)
def add_investment(
    data: InvestmentCreateRequest,
    user_id: str = Depends(get_user_id),
    service: PortfolioService = Depends(get_portfolio_service),
) -> HoldingResponse:
    """Add a holding. The ticker must be priceable right now."""
    holding = service.add_investment(user_id, data.ticker, data.quantity, data.avg_buy_price)
    return HoldingResponse(
        ticker=holding.ticker,
        quantity=holding.quantity,
        avg_buy_price=holding.avg_buy_price,
    )


@router.post("/portfolio/refresh", response_model=RefreshResponse)
def refresh_portfolio(
    user_id: str = Depends(get_user_id),
    service: PortfolioService = Depends(get_portfolio_service),
) -> RefreshResponse:
    """Refresh prices for every ticker the user holds."""
    return RefreshResponse(updated=service.refresh_portfolio(user_id))


@router.get("/portfolio/base-currency", response_model=BaseCurrencyResponse)
def get_base_currency(
    user_id: str = Depends(get_user_id),
    service: PortfolioService = Depends(get_portfolio_service),
) -> BaseCurrencyResponse:
    return BaseCurrencyResponse(base_currency=service.get_base_currency(user_id))


@router.put("/portfolio/base-currency", response_model=BaseCurrencyResponse)
def update_base_currency(
    data: BaseCurrencyRequest,
    user_id: str = Depends(get_user_id),
    service: PortfolioService = Depends(get_portfolio_service),
) -> BaseCurrencyResponse:
    return BaseCurrencyResponse(base_currency=service.update_base_currency(user_id, data.currency))


@router.put("/portfolio/{ticker}", response_model=HoldingResponse)
def update_investment(
    ticker: str,
    data: InvestmentUpdateRequest,
    user_id: str = Depends(get_user_id),
    service: PortfolioService = Depends(get_portfolio_service),
) -> HoldingResponse:
    """Change quantity and average buy price of a holding."""
    holding = service.update_investment(user_id, ticker, data.quantity, data.avg_buy_price)
    return HoldingResponse(
        ticker=holding.ticker,
        quantity=holding.quantity,
        avg_buy_price=holding.avg_buy_price,
    )


@router.delete("/portfolio/{ticker}", status_code=204)
def remove_investment(
    ticker: str,
    user_id: str = Depends(get_user_id),
    service: PortfolioService = Depends(get_portfolio_service),
) -> Response:
    service.remove_investment(user_id, ticker)
    return Response(status_code=204)


@router.get("/financial-health", response_model=FinancialHealthResponse)
def get_financial_health(
    user_id: str = Depends(get_user_id),
    service: PortfolioService = Depends(get_portfolio_service),
) -> FinancialHealthResponse:
    """Investment balance at last known prices, in the user's base currency."""
    return FinancialHealthResponse.from_view(service.get_financial_health(user_id))
