"""Domain models package."""

from networth.domain.models.enums import PriceSource, AssetType
from networth.domain.models.asset import Asset, Holding, PortfolioJoinedRow

__all__ = [
    "PriceSource",
    "AssetType",
    "Asset",
    "Holding",
    "PortfolioJoinedRow",
]
