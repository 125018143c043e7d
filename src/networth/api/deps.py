"""Dependency injection for FastAPI."""

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from networth.app_context import AppContext
from networth.core.exceptions import ValidationError
from networth.repositories.sqlalchemy.database import get_db
from networth.services import MarketDataService, PortfolioService


def get_app_context(request: Request) -> AppContext:
    """Provide the AppContext built at startup."""
    return request.app.state.context


def get_user_id(x_user_id: str = Header(..., alias="X-User-Id")) -> str:
    """Identify the calling user from the X-User-Id header."""
    user_id = x_user_id.strip()
    if not user_id:
        raise ValidationError("X-User-Id header must not be empty")
    return user_id


def get_market_data_service(
    context: AppContext = Depends(get_app_context),
    db: Session = Depends(get_db),
) -> MarketDataService:
    """Provide MarketDataService instance."""
    return context.market_data(db)


def get_portfolio_service(
    context: AppContext = Depends(get_app_context),
    db: Session = Depends(get_db),
) -> PortfolioService:
    """Provide PortfolioService instance."""
    return context.portfolio(db)
