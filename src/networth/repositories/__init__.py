"""Repository layer - data access abstractions and implementations."""

from networth.repositories.protocols import (
    AssetRepository,
    HoldingRepository,
    SettingsRepository,
)

__all__ = [
    "AssetRepository",
    "HoldingRepository",
    "SettingsRepository",
]
