"""Portfolio service: holdings CRUD and currency-converted portfolio reports."""

import logging
from decimal import Decimal

from networth.core.exceptions import NotFoundError, ValidationError
from networth.core.money import ZERO, normalize_currency, normalize_ticker
from networth.domain.models import Holding
from networth.domain.views import FinancialHealthView, PortfolioReport
from networth.repositories.protocols import HoldingRepository, SettingsRepository
from networth.services.market_data_service import MarketDataService
from networth.services.valuation import asset_currency_of, build_portfolio_report

logger = logging.getLogger(__name__)


class PortfolioService:
    """
    Service for a user's investments.

    Reports always fetch first and compute second: prices are refreshed and
    rates resolved before the valuation runs.
    """

    def __init__(
        self,
        holding_repo: HoldingRepository,
        settings_repo: SettingsRepository,
        market_data_service: MarketDataService,
    ):
        self._holdings = holding_repo
        self._settings = settings_repo
        self._market = market_data_service

    def get_portfolio(self, user_id: str) -> PortfolioReport:
        """
        Refresh prices for every held ticker, then value the portfolio.

        Tickers whose refresh fails are valued at their last known price.
        """
        self.refresh_portfolio(user_id)
        return self._build_report(user_id)

    def refresh_portfolio(self, user_id: str) -> int:
        """Refresh prices for the user's distinct tickers; returns the number attempted."""
        tickers = self._holdings.get_tickers(user_id)
        return self._market.refresh_all(tickers)

    def get_financial_health(self, user_id: str) -> FinancialHealthView:
        """Investment balance at last known prices, converted to the base currency."""
        report = self._build_report(user_id)
        return FinancialHealthView(
            investment_balance=report.total_value,
            base_currency=report.base_currency,
            warnings=report.warnings,
        )

    def add_investment(
        self,
        user_id: str,
        ticker: str,
        quantity: Decimal,
        avg_buy_price: Decimal,
    ) -> Holding:
        """
        Add a holding.

        The ticker is validated by pricing it first; if no price can be
        obtained the error propagates and nothing is stored.
        """
        symbol = normalize_ticker(ticker)
        if symbol is None:
            raise ValidationError("Ticker is required")
        self._validate_amounts(quantity, avg_buy_price)

        self._market.ensure_price_fresh(symbol)

        return self._holdings.add_item(
            Holding(
                user_id=user_id,
                ticker=symbol,
                quantity=quantity,
                avg_buy_price=avg_buy_price,
            )
        )

    def update_investment(
        self,
        user_id: str,
        ticker: str,
        quantity: Decimal,
        avg_buy_price: Decimal,
    ) -> Holding:
        """Change quantity and average buy price of an existing holding."""
        symbol = normalize_ticker(ticker) or ""
        self._validate_amounts(quantity, avg_buy_price)
        return self._holdings.update(user_id, symbol, quantity, avg_buy_price)

    def remove_investment(self, user_id: str, ticker: str) -> None:
        """Delete a holding."""
        symbol = normalize_ticker(ticker) or ""
        deleted = self._holdings.delete(user_id, symbol)
        if deleted == 0:
            raise NotFoundError("Investment", symbol)

    def get_base_currency(self, user_id: str) -> str:
        return self._settings.get_base_currency(user_id)

    def update_base_currency(self, user_id: str, currency: str) -> str:
        """Set the user's base currency; must be one of the supported codes."""
        try:
            code = normalize_currency(currency)
        except ValueError:
            raise ValidationError(f"Invalid currency code: {currency}")
        if not self._settings.is_supported_currency(code):
            raise ValidationError(f"Invalid currency code: {code}")
        self._settings.set_base_currency(user_id, code)
        return code

    def get_available_currencies(self) -> list[str]:
        return self._settings.list_currencies()

    def _build_report(self, user_id: str) -> PortfolioReport:
        base_currency = self._settings.get_base_currency(user_id).strip().upper()
        items = self._holdings.get_all_joined(user_id)

        foreign = {asset_currency_of(item.currency) for item in items}
        foreign.discard(base_currency)
        rates, unavailable = self._market.get_rates(foreign, base_currency)
        if unavailable:
            logger.warning(
                "Valuing %s holdings for user %s without conversion to %s",
                ", ".join(unavailable),
                user_id,
                base_currency,
            )

        return build_portfolio_report(items, rates, base_currency)

    @staticmethod
    def _validate_amounts(quantity: Decimal, avg_buy_price: Decimal) -> None:
        if quantity <= ZERO:
            raise ValidationError("Quantity must be positive")
        if avg_buy_price < ZERO:
            raise ValidationError("Average buy price cannot be negative")
