"""
Portfolio valuation: pure functions, no I/O.

Turns holdings joined with their current native prices into per-holding and
aggregate figures in the user's base currency. All arithmetic stays in
Decimal; rounding to 2 places happens only at serialization.
"""

from decimal import Decimal
from typing import Iterable, Mapping, Optional

from networth.core.money import HUNDRED, ONE, ZERO
from networth.domain.models import PortfolioJoinedRow
from networth.domain.views import InvestmentSummary, PortfolioReport

DEFAULT_ASSET_CURRENCY = "USD"


def asset_currency_of(currency: Optional[str]) -> str:
    """Native currency on record for an asset, USD when the catalog has none."""
    return (currency or "").strip().upper() or DEFAULT_ASSET_CURRENCY


def calculate_change_percent(current_price: Decimal, base_price: Decimal) -> Decimal:
    """Percentage change from base_price; exactly 0 when base_price is not positive."""
    if base_price > ZERO:
        return (current_price - base_price) / base_price * HUNDRED
    return ZERO


def resolve_rate(
    asset_currency: str,
    base_currency: str,
    exchange_rates: Mapping[str, Decimal],
) -> tuple[Decimal, bool]:
    """
    Rate from asset_currency into base_currency, and whether it was missing.

    A missing rate degrades to 1 (the holding is treated as already in the
    base currency) instead of failing the whole report; the flag lets the
    caller surface that.
    """
    if asset_currency == base_currency:
        return ONE, False
    rate = exchange_rates.get(asset_currency)
    if rate is None:
        return ONE, True
    return rate, False


def calculate_investment_summary(
    item: PortfolioJoinedRow,
    exchange_rate: Decimal,
    base_currency: str,
    rate_missing: bool = False,
) -> InvestmentSummary:
    """Value one holding in its native currency and in the base currency."""
    asset_currency = asset_currency_of(item.currency)

    current_price_converted = item.current_price * exchange_rate
    avg_buy_price_converted = item.avg_buy_price * exchange_rate

    return InvestmentSummary(
        ticker=item.ticker,
        name=item.name,
        quantity=item.quantity,
        avg_buy_price=item.avg_buy_price,
        avg_buy_price_converted=avg_buy_price_converted,
        current_price=item.current_price,
        current_price_converted=current_price_converted,
        total_value=item.quantity * item.current_price,
        total_value_converted=item.quantity * current_price_converted,
        # Native prices: the ratio is the same in any currency
        change_pct=calculate_change_percent(item.current_price, item.avg_buy_price),
        currency=base_currency,
        asset_currency=asset_currency,
        icon_url=item.icon_url,
        rate_missing=rate_missing,
    )


def build_portfolio_report(
    items: Iterable[PortfolioJoinedRow],
    exchange_rates: Mapping[str, Decimal],
    base_currency: str,
) -> PortfolioReport:
    """
    Build the full report.

    `exchange_rates` maps currency code -> rate into `base_currency`. Totals
    accumulate each holding at its own resolved rate.
    """
    base_currency = base_currency.strip().upper()
    report = PortfolioReport(base_currency=base_currency)
    missing_currencies: set[str] = set()

    for item in items:
        asset_currency = asset_currency_of(item.currency)
        rate, rate_missing = resolve_rate(asset_currency, base_currency, exchange_rates)
        if rate_missing:
            missing_currencies.add(asset_currency)

        cost_converted = item.quantity * item.avg_buy_price * rate
        value_converted = item.quantity * item.current_price * rate

        report.total_cost += cost_converted
        report.absolute_change += value_converted - cost_converted
        report.total_value += value_converted

        report.investments.append(
            calculate_investment_summary(item, rate, base_currency, rate_missing=rate_missing)
        )

    for currency in sorted(missing_currencies):
        report.warnings.append(
            f"No {currency} -> {base_currency} exchange rate available; "
            f"{currency} holdings are shown unconverted"
        )

    return report
