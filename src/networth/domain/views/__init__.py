"""View models package."""

from networth.domain.views.portfolio import (
    PriceQuote,
    InvestmentSummary,
    PortfolioReport,
    FinancialHealthView,
)

__all__ = [
    "PriceQuote",
    "InvestmentSummary",
    "PortfolioReport",
    "FinancialHealthView",
]
