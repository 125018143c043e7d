"""Enumerations for domain models."""

from enum import Enum
from typing import Optional


class PriceSource(str, Enum):
    """Upstream services an asset's price can be pinned to."""

    YAHOO = "YAHOO"  # equities, ETFs, FX-quoted instruments
    BINANCE = "BINANCE"  # crypto exchange ticker, e.g. BTCUSDT
    COINGECKO = "COINGECKO"  # crypto aggregator coin id, e.g. bitcoin

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["PriceSource"]:
        """Return the matching source (case-insensitive) or None when unrecognized."""
        if value is None:
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class AssetType(str, Enum):
    """Catalog asset categories."""

    STOCK = "Stock"
    CRYPTO = "Crypto"
