"""Domain layer - pure business models with no external dependencies."""

from networth.domain.models import (
    PriceSource,
    AssetType,
    Asset,
    Holding,
    PortfolioJoinedRow,
)
from networth.domain.views import (
    PriceQuote,
    InvestmentSummary,
    PortfolioReport,
    FinancialHealthView,
)

__all__ = [
    "PriceSource",
    "AssetType",
    "Asset",
    "Holding",
    "PortfolioJoinedRow",
    "PriceQuote",
    "InvestmentSummary",
    "PortfolioReport",
    "FinancialHealthView",
]
