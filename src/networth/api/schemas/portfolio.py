"""Pydantic schemas for portfolio endpoints."""

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, Field, PlainSerializer, field_validator

from networth.core.money import round_money
from networth.domain.views import FinancialHealthView, InvestmentSummary, PortfolioReport

# Money is kept unrounded internally and rounded to cents only on the way out
Money = Annotated[Decimal, PlainSerializer(lambda v: str(round_money(v)), return_type=str)]


class InvestmentCreateRequest(BaseModel):
    """Request schema for adding a holding."""

    ticker: str = Field(..., min_length=1, max_length=20, description="Caller-facing ticker")
    quantity: Decimal = Field(..., gt=0, description="Units held")
    avg_buy_price: Decimal = Field(..., ge=0, description="Average buy price in the asset's currency")

    @field_validator("ticker")
    @classmethod
    def uppercase_ticker(cls, v: str) -> str:
        return v.strip().upper()


class InvestmentUpdateRequest(BaseModel):
    """Request schema for changing a holding."""

    quantity: Decimal = Field(..., gt=0)
    avg_buy_price: Decimal = Field(..., ge=0)


class HoldingResponse(BaseModel):
    ticker: str
    quantity: Decimal
    avg_buy_price: Decimal


class BaseCurrencyRequest(BaseModel):
    currency: str = Field(..., description="ISO 4217 code, e.g. SGD")


class BaseCurrencyResponse(BaseModel):
    base_currency: str


class RefreshResponse(BaseModel):
    """Number of tickers a refresh attempted."""

    updated: int


class InvestmentResponse(BaseModel):
    """Response schema for a single valued holding."""

    ticker: str
    name: str
    quantity: Decimal
    avg_buy_price: Money
    avg_buy_price_converted: Money
    current_price: Money
    current_price_converted: Money
    total_value: Money
    total_value_converted: Money
    change_pct: Money
    currency: str
    asset_currency: str
    icon_url: Optional[str] = None
    rate_missing: bool = False

    @classmethod
    def from_summary(cls, summary: InvestmentSummary) -> "InvestmentResponse":
        return cls(
            ticker=summary.ticker,
            name=summary.name,
            quantity=summary.quantity,
            avg_buy_price=summary.avg_buy_price,
            avg_buy_price_converted=summary.avg_buy_price_converted,
            current_price=summary.current_price,
            current_price_converted=summary.current_price_converted,
            total_value=summary.total_value,
            total_value_converted=summary.total_value_converted,
            change_pct=summary.change_pct,
            currency=summary.currency,
            asset_currency=summary.asset_currency,
            icon_url=summary.icon_url,
            rate_missing=summary.rate_missing,
        )


class PortfolioResponse(BaseModel):
    """Response schema for a full portfolio valuation."""

    investments: list[InvestmentResponse]
    total_cost: Money
    absolute_change: Money
    total_value: Money
    base_currency: str
    warnings: list[str] = []

    @classmethod
    def from_report(cls, report: PortfolioReport) -> "PortfolioResponse":
        return cls(
            investments=[InvestmentResponse.from_summary(s) for s in report.investments],
            total_cost=report.total_cost,
            absolute_change=report.absolute_change,
            total_value=report.total_value,
            base_currency=report.base_currency,
            warnings=list(report.warnings),
        )


class FinancialHealthResponse(BaseModel):
    investment_balance: Money
    base_currency: str
    warnings: list[str] = []

    @classmethod
    def from_view(cls, view: FinancialHealthView) -> "FinancialHealthResponse":
        return cls(
            investment_balance=view.investment_balance,
            base_currency=view.base_currency,
            warnings=list(view.warnings),
        )
