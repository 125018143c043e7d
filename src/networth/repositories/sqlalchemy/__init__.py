"""SQLAlchemy repository implementations."""

from networth.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from networth.repositories.sqlalchemy.asset_repo import SqlAlchemyAssetRepository
from networth.repositories.sqlalchemy.holding_repo import SqlAlchemyHoldingRepository
from networth.repositories.sqlalchemy.settings_repo import SqlAlchemySettingsRepository
from networth.repositories.sqlalchemy.seed import seed_reference_data

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyAssetRepository",
    "SqlAlchemyHoldingRepository",
    "SqlAlchemySettingsRepository",
    "seed_reference_data",
]
