"""Pydantic schemas for market data endpoints."""

from decimal import Decimal

from pydantic import BaseModel

from networth.api.schemas.portfolio import Money


class PriceResponse(BaseModel):
    ticker: str
    price: Money


class RateResponse(BaseModel):
    """FX rate; unrounded, since rates carry more precision than money."""

    from_currency: str
    to_currency: str
    rate: Decimal
