"""Pydantic schemas for API request/response."""

from networth.api.schemas.portfolio import (
    Money,
    InvestmentCreateRequest,
    InvestmentUpdateRequest,
    HoldingResponse,
    BaseCurrencyRequest,
    BaseCurrencyResponse,
    RefreshResponse,
    InvestmentResponse,
    PortfolioResponse,
    FinancialHealthResponse,
)
from networth.api.schemas.market import PriceResponse, RateResponse
from networth.api.schemas.catalog import AssetResponse, CurrenciesResponse

__all__ = [
    "Money",
    "InvestmentCreateRequest",
    "InvestmentUpdateRequest",
    "HoldingResponse",
    "BaseCurrencyRequest",
    "BaseCurrencyResponse",
    "RefreshResponse",
    "InvestmentResponse",
    "PortfolioResponse",
    "FinancialHealthResponse",
    "PriceResponse",
    "RateResponse",
    "AssetResponse",
    "CurrenciesResponse",
]
