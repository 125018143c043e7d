"""Repository protocol definitions (interfaces)."""

from networth.repositories.protocols.asset_repo import AssetRepository
from networth.repositories.protocols.holding_repo import HoldingRepository
from networth.repositories.protocols.settings_repo import SettingsRepository

__all__ = [
    "AssetRepository",
    "HoldingRepository",
    "SettingsRepository",
]
