"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Text,
    ForeignKey,
    Numeric,
)
from sqlalchemy.orm import relationship

from networth.domain.models import AssetType
from networth.repositories.sqlalchemy.database import Base


class AssetORM(Base):
    """SQLAlchemy model for a catalog Asset."""

    __tablename__ = "assets"

    ticker = Column(String(20), primary_key=True)
    name = Column(String(255), nullable=False)
    asset_type = Column(String(20), nullable=False, default=AssetType.STOCK.value)
    api_ticker = Column(String(50), nullable=True)
    source = Column(String(50), nullable=True, default="YAHOO")
    current_price = Column(Numeric(precision=24, scale=8), nullable=True)
    currency = Column(String(3), nullable=True)
    icon_url = Column(Text, nullable=True)
    last_updated = Column(DateTime, nullable=True)

    holdings = relationship("HoldingORM", back_populates="asset")


class HoldingORM(Base):
    """SQLAlchemy model for a user's Holding."""

    __tablename__ = "portfolio"

    user_id = Column(String(36), primary_key=True)
    ticker = Column(String(20), ForeignKey("assets.ticker"), primary_key=True)
    quantity = Column(Numeric(precision=24, scale=8), nullable=False, default=Decimal("0"))
    avg_buy_price = Column(Numeric(precision=24, scale=8), nullable=False, default=Decimal("0"))

    asset = relationship("AssetORM", back_populates="holdings")


class UserSettingsORM(Base):
    """SQLAlchemy model for per-user preferences."""

    __tablename__ = "user_settings"

    user_id = Column(String(36), primary_key=True)
    base_currency = Column(String(3), nullable=False, default="USD")


class CurrencyORM(Base):
    """SQLAlchemy model for a supported base currency."""

    __tablename__ = "currencies"

    code = Column(String(3), primary_key=True)
    symbol = Column(String(5), nullable=True)
    name = Column(String(50), nullable=True)
