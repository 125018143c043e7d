"""Asset catalog and holding domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from networth.domain.models.enums import AssetType


@dataclass
class Asset:
    """
    Catalog entry for a tradable asset.

    `api_ticker` is the symbol the pinned upstream expects and may differ from
    the caller-facing `ticker` (BTC -> BTCUSDT on Binance, bitcoin on CoinGecko).
    `current_price`/`currency` hold the last known price written by a refresh.
    """

    ticker: str
    name: str
    asset_type: str = AssetType.STOCK.value
    api_ticker: Optional[str] = None
    source: Optional[str] = None
    current_price: Optional[Decimal] = None
    currency: Optional[str] = None
    icon_url: Optional[str] = None
    last_updated: Optional[datetime] = None


@dataclass
class Holding:
    """A user's position in one asset. Read-only to the valuation core."""

    user_id: str
    ticker: str
    quantity: Decimal
    avg_buy_price: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class PortfolioJoinedRow:
    """Holding joined with its catalog asset (current native price and currency)."""

    ticker: str
    name: str
    quantity: Decimal
    avg_buy_price: Decimal
    current_price: Decimal
    source: Optional[str] = None
    api_ticker: Optional[str] = None
    currency: Optional[str] = None
    icon_url: Optional[str] = None
