"""SQLAlchemy implementation of SettingsRepository."""

from sqlalchemy.orm import Session

from networth.repositories.sqlalchemy.orm_models import CurrencyORM, UserSettingsORM


class SqlAlchemySettingsRepository:
    """SQLAlchemy-backed per-user preferences."""

    def __init__(self, db: Session, default_base_currency: str = "USD"):
        self._db = db
        self._default_base_currency = default_base_currency

    def get_base_currency(self, user_id: str) -> str:
        """Base currency for the user (application default when unset)."""
        orm_settings = (
            self._db.query(UserSettingsORM)
            .filter(UserSettingsORM.user_id == user_id)
            .first()
        )
        if orm_settings is None:
            return self._default_base_currency
        return orm_settings.base_currency

    def set_base_currency(self, user_id: str, currency: str) -> None:
        """Store the user's base currency."""
        orm_settings = (
            self._db.query(UserSettingsORM)
            .filter(UserSettingsORM.user_id == user_id)
            .first()
        )
        if orm_settings:
            orm_settings.base_currency = currency
        else:
            self._db.add(UserSettingsORM(user_id=user_id, base_currency=currency))
        self._db.commit()

    def list_currencies(self) -> list[str]:
        """Supported base currency codes, sorted."""
        rows = self._db.query(CurrencyORM.code).order_by(CurrencyORM.code).all()
        return [r.code for r in rows]

    def is_supported_currency(self, code: str) -> bool:
        return (
            self._db.query(CurrencyORM.code).filter(CurrencyORM.code == code).first()
            is not None
        )
