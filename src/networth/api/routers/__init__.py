"""API routers package."""

from networth.api.routers.portfolio import router as portfolio_router
from networth.api.routers.market import router as market_router
from networth.api.routers.catalog import router as catalog_router

__all__ = [
    "portfolio_router",
    "market_router",
    "catalog_router",
]
