"""SQLAlchemy implementation of AssetRepository."""

import threading
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from networth.core.timezone import now_eastern, to_eastern, to_storage
from networth.domain.models import Asset
from networth.repositories.sqlalchemy.orm_models import AssetORM


class SqlAlchemyAssetRepository:
    """
    SQLAlchemy-backed asset catalog.

    Price and icon writes arrive concurrently from refresh workers sharing one
    Session, so every operation on the session is serialized.
    """

    def __init__(self, db: Session):
        self._db = db
        self._lock = threading.RLock()

    def get_asset(self, ticker: str) -> Optional[Asset]:
        """Look up a catalog entry by caller-facing ticker."""
        with self._lock:
            orm_asset = self._db.query(AssetORM).filter(AssetORM.ticker == ticker).first()
            return self._to_domain(orm_asset) if orm_asset else None

    def list_assets(self) -> list[Asset]:
        """List all catalog entries ordered by name."""
        with self._lock:
            orm_assets = self._db.query(AssetORM).order_by(AssetORM.name).all()
            return [self._to_domain(a) for a in orm_assets]

    def upsert_asset(self, asset: Asset) -> Asset:
        """Insert or replace a catalog entry."""
        with self._lock:
            orm_asset = self._db.query(AssetORM).filter(AssetORM.ticker == asset.ticker).first()

            if orm_asset:
                orm_asset.name = asset.name
                orm_asset.asset_type = asset.asset_type
                orm_asset.api_ticker = asset.api_ticker
                orm_asset.source = asset.source
                orm_asset.current_price = asset.current_price
                orm_asset.currency = asset.currency
                orm_asset.icon_url = asset.icon_url
            else:
                orm_asset = AssetORM(
                    ticker=asset.ticker,
                    name=asset.name,
                    asset_type=asset.asset_type,
                    api_ticker=asset.api_ticker,
                    source=asset.source,
                    current_price=asset.current_price,
                    currency=asset.currency,
                    icon_url=asset.icon_url,
                    last_updated=to_storage(asset.last_updated),
                )
                self._db.add(orm_asset)

            self._db.commit()
            self._db.refresh(orm_asset)
            return self._to_domain(orm_asset)

    def update_asset_price(self, ticker: str, price: Decimal, currency: str) -> None:
        """Persist the last known price and its native currency."""
        with self._lock:
            self._db.query(AssetORM).filter(AssetORM.ticker == ticker).update(
                {
                    AssetORM.current_price: price,
                    AssetORM.currency: currency,
                    AssetORM.last_updated: to_storage(now_eastern()),
                },
                synchronize_session=False,
            )
            self._db.commit()

    def update_asset_icon(self, ticker: str, icon_url: str) -> None:
        """Persist a lazily-resolved icon URL."""
        with self._lock:
            self._db.query(AssetORM).filter(AssetORM.ticker == ticker).update(
                {AssetORM.icon_url: icon_url},
                synchronize_session=False,
            )
            self._db.commit()

    @staticmethod
    def _to_domain(orm: AssetORM) -> Asset:
        """Convert ORM asset to domain model."""
        return Asset(
            ticker=orm.ticker,
            name=orm.name,
            asset_type=orm.asset_type,
            api_ticker=orm.api_ticker,
            source=orm.source,
            current_price=Decimal(str(orm.current_price)) if orm.current_price is not None else None,
            currency=orm.currency,
            icon_url=orm.icon_url,
            last_updated=to_eastern(orm.last_updated),
        )
