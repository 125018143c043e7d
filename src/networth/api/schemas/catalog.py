"""Pydantic schemas for reference data endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from networth.api.schemas.portfolio import Money
from networth.domain.models import Asset


class AssetResponse(BaseModel):
    """A catalog entry with its last known price."""

    ticker: str
    name: str
    asset_type: str
    api_ticker: Optional[str] = None
    source: Optional[str] = None
    current_price: Optional[Money] = None
    currency: Optional[str] = None
    icon_url: Optional[str] = None
    last_updated: Optional[datetime] = None

    @classmethod
    def from_asset(cls, asset: Asset) -> "AssetResponse":
        return cls(
            ticker=asset.ticker,
            name=asset.name,
            asset_type=asset.asset_type,
            api_ticker=asset.api_ticker,
            source=asset.source,
            current_price=asset.current_price,
            currency=asset.currency,
            icon_url=asset.icon_url,
            last_updated=asset.last_updated,
        )


class CurrenciesResponse(BaseModel):
    currencies: list[str]
