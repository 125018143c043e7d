"""Service layer - business logic orchestration."""

from networth.services.ttl_cache import TTLCache
from networth.services.market_data_service import MarketDataService
from networth.services.portfolio_service import PortfolioService
from networth.services.valuation import (
    build_portfolio_report,
    calculate_change_percent,
    calculate_investment_summary,
)

__all__ = [
    "TTLCache",
    "MarketDataService",
    "PortfolioService",
    "build_portfolio_report",
    "calculate_change_percent",
    "calculate_investment_summary",
]
