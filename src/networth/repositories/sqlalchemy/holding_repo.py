"""SQLAlchemy implementation of HoldingRepository."""

from decimal import Decimal

from sqlalchemy.orm import Session

from networth.core.exceptions import NotFoundError, ValidationError
from networth.domain.models import Holding, PortfolioJoinedRow
from networth.repositories.sqlalchemy.orm_models import AssetORM, HoldingORM


class SqlAlchemyHoldingRepository:
    """SQLAlchemy-backed holdings repository."""

    def __init__(self, db: Session):
        self._db = db

    def get_tickers(self, user_id: str) -> list[str]:
        """Distinct tickers the user holds."""
        rows = (
            self._db.query(HoldingORM.ticker)
            .filter(HoldingORM.user_id == user_id)
            .distinct()
            .order_by(HoldingORM.ticker)
            .all()
        )
        return [r.ticker for r in rows]

    def get_all_joined(self, user_id: str) -> list[PortfolioJoinedRow]:
        """Holdings joined with their catalog asset, ordered by ticker."""
        rows = (
            self._db.query(HoldingORM, AssetORM)
            .join(AssetORM, HoldingORM.ticker == AssetORM.ticker)
            .filter(HoldingORM.user_id == user_id)
            .order_by(HoldingORM.ticker)
            .all()
        )
        return [
            PortfolioJoinedRow(
                ticker=holding.ticker,
                name=asset.name,
                quantity=_to_decimal(holding.quantity),
                avg_buy_price=_to_decimal(holding.avg_buy_price),
                current_price=_to_decimal(asset.current_price),
                source=asset.source,
                api_ticker=asset.api_ticker,
                currency=asset.currency,
                icon_url=asset.icon_url,
            )
            for holding, asset in rows
        ]

    def add_item(self, holding: Holding) -> Holding:
        """Persist a new holding."""
        asset = self._db.query(AssetORM).filter(AssetORM.ticker == holding.ticker).first()
        if asset is None:
            raise ValidationError(f"{holding.ticker} is not a supported asset")

        existing = self._get(holding.user_id, holding.ticker)
        if existing is not None:
            raise ValidationError(f"{holding.ticker} is already in your portfolio")

        orm_holding = HoldingORM(
            user_id=holding.user_id,
            ticker=holding.ticker,
            quantity=holding.quantity,
            avg_buy_price=holding.avg_buy_price,
        )
        self._db.add(orm_holding)
        self._db.commit()
        self._db.refresh(orm_holding)
        return self._to_domain(orm_holding)

    def update(
        self,
        user_id: str,
        ticker: str,
        quantity: Decimal,
        avg_buy_price: Decimal,
    ) -> Holding:
        """Change quantity and average buy price."""
        orm_holding = self._get(user_id, ticker)
        if orm_holding is None:
            raise NotFoundError("Investment", ticker)

        orm_holding.quantity = quantity
        orm_holding.avg_buy_price = avg_buy_price
        self._db.commit()
        self._db.refresh(orm_holding)
        return self._to_domain(orm_holding)

    def delete(self, user_id: str, ticker: str) -> int:
        """Delete a holding; returns the number of rows removed."""
        deleted = (
            self._db.query(HoldingORM)
            .filter(HoldingORM.user_id == user_id, HoldingORM.ticker == ticker)
            .delete()
        )
        self._db.commit()
        return deleted

    def _get(self, user_id: str, ticker: str):
        return (
            self._db.query(HoldingORM)
            .filter(HoldingORM.user_id == user_id, HoldingORM.ticker == ticker)
            .first()
        )

    @staticmethod
    def _to_domain(orm: HoldingORM) -> Holding:
        """Convert ORM holding to domain model."""
        return Holding(
            user_id=orm.user_id,
            ticker=orm.ticker,
            quantity=_to_decimal(orm.quantity),
            avg_buy_price=_to_decimal(orm.avg_buy_price),
        )


def _to_decimal(value) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0")
