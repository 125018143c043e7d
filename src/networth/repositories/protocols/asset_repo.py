"""Asset catalog repository protocol."""

from decimal import Decimal
from typing import Protocol, Optional

from networth.domain.models import Asset


class AssetRepository(Protocol):
    """Interface for the asset catalog (ticker -> provider, symbol, last known price)."""

    def get_asset(self, ticker: str) -> Optional[Asset]:
        """Look up a catalog entry by caller-facing ticker."""
        ...

    def list_assets(self) -> list[Asset]:
        """List all catalog entries ordered by name."""
        ...

    def upsert_asset(self, asset: Asset) -> Asset:
        """Insert or replace a catalog entry."""
        ...

    def update_asset_price(self, ticker: str, price: Decimal, currency: str) -> None:
        """Persist the last known price and its native currency."""
        ...

    def update_asset_icon(self, ticker: str, icon_url: str) -> None:
        """Persist a lazily-resolved icon URL."""
        ...
