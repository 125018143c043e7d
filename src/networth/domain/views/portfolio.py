"""View models for quotes and portfolio valuation outputs."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PriceQuote:
    """Price in the instrument's native currency, as returned by an adapter."""

    price: Decimal
    currency: str = "USD"


@dataclass
class InvestmentSummary:
    """
    Valuation of a single holding.

    Plain fields are in the asset's native currency; `*_converted` fields are
    in the report's base currency. `change_pct` is always computed from native
    prices so FX moves never leak into the performance figure.
    """

    ticker: str
    name: str
    quantity: Decimal
    avg_buy_price: Decimal
    avg_buy_price_converted: Decimal
    current_price: Decimal
    current_price_converted: Decimal
    total_value: Decimal
    total_value_converted: Decimal
    change_pct: Decimal
    currency: str
    asset_currency: str
    icon_url: Optional[str] = None
    rate_missing: bool = False


@dataclass
class PortfolioReport:
    """Aggregate valuation; totals are in the base currency."""

    investments: list[InvestmentSummary] = field(default_factory=list)
    total_cost: Decimal = field(default_factory=lambda: Decimal("0"))
    absolute_change: Decimal = field(default_factory=lambda: Decimal("0"))
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    base_currency: str = "USD"
    warnings: list[str] = field(default_factory=list)


@dataclass
class FinancialHealthView:
    """Investment balance at last known prices, in the base currency."""

    investment_balance: Decimal
    base_currency: str
    warnings: list[str] = field(default_factory=list)
