"""
Unit tests for the valuation functions.

Tests cover:
- Native and converted figures for a single holding
- Change percentage guard and currency invariance
- Aggregate totals across holdings at their own rates
- Missing exchange rates degrade to 1 and are reported
"""

from decimal import Decimal

import pytest

from networth.domain.models import PortfolioJoinedRow
from networth.services.valuation import (
    asset_currency_of,
    build_portfolio_report,
    calculate_change_percent,
    calculate_investment_summary,
    resolve_rate,
)


def make_row(
    ticker: str = "AAPL",
    quantity: str = "10",
    avg_buy_price: str = "150.00",
    current_price: str = "180.00",
    currency="USD",
) -> PortfolioJoinedRow:
    return PortfolioJoinedRow(
        ticker=ticker,
        name=f"{ticker} Inc.",
        quantity=Decimal(quantity),
        avg_buy_price=Decimal(avg_buy_price),
        current_price=Decimal(current_price),
        currency=currency,
    )


# =============================================================================
# CHANGE PERCENT TESTS
# =============================================================================


class TestChangePercent:
    """Tests for calculate_change_percent."""

    def test_gain(self):
        assert calculate_change_percent(Decimal("180"), Decimal("150")) == Decimal("20")

    def test_loss(self):
        assert calculate_change_percent(Decimal("90"), Decimal("100")) == Decimal("-10")

    @pytest.mark.parametrize("current", ["0", "1", "99999.99"])
    def test_zero_base_price_is_zero(self, current):
        """
        GIVEN an average buy price of 0
        WHEN the change percent is computed
        THEN it is exactly 0 whatever the current price
        """
        assert calculate_change_percent(Decimal(current), Decimal("0")) == Decimal("0")

    def test_negative_base_price_is_zero(self):
        assert calculate_change_percent(Decimal("10"), Decimal("-5")) == Decimal("0")


# =============================================================================
# RATE RESOLUTION TESTS
# =============================================================================


class TestResolveRate:
    """Tests for resolve_rate and asset_currency_of."""

    def test_same_currency_is_one(self):
        assert resolve_rate("USD", "USD", {"USD": Decimal("2")}) == (Decimal("1"), False)

    def test_rate_from_map(self):
        assert resolve_rate("USD", "SGD", {"USD": Decimal("1.35")}) == (Decimal("1.35"), False)

    def test_missing_rate_defaults_to_one_and_is_flagged(self):
        assert resolve_rate("EUR", "SGD", {}) == (Decimal("1"), True)

    @pytest.mark.parametrize("currency", [None, "", "  "])
    def test_asset_currency_defaults_to_usd(self, currency):
        assert asset_currency_of(currency) == "USD"

    def test_asset_currency_is_normalized(self):
        assert asset_currency_of(" sgd ") == "SGD"


# =============================================================================
# SINGLE HOLDING TESTS
# =============================================================================


class TestInvestmentSummary:
    """Tests for calculate_investment_summary."""

    def test_usd_holding_in_usd(self):
        """
        GIVEN 10 units bought at 150.00, now 180.00, all USD
        WHEN summarized in USD
        THEN total value is 1800.00 and change is 20%
        """
        summary = calculate_investment_summary(make_row(), Decimal("1"), "USD")

        assert summary.total_value == Decimal("1800.00")
        assert summary.total_value_converted == Decimal("1800.00")
        assert summary.change_pct == Decimal("20")
        assert summary.currency == "USD"
        assert summary.asset_currency == "USD"
        assert summary.rate_missing is False

    def test_same_currency_conversion_is_exact(self):
        row = make_row(avg_buy_price="123.456789", current_price="98.7654321")

        summary = calculate_investment_summary(row, Decimal("1"), "USD")

        assert summary.current_price_converted == row.current_price
        assert summary.avg_buy_price_converted == row.avg_buy_price

    def test_usd_holding_in_sgd(self):
        """
        GIVEN the same holding and a USD->SGD rate of 1.35
        WHEN summarized in SGD
        THEN converted figures scale by 1.35 and change stays 20%
        """
        summary = calculate_investment_summary(make_row(), Decimal("1.35"), "SGD")

        assert summary.avg_buy_price_converted == Decimal("202.50")
        assert summary.current_price_converted == Decimal("243.00")
        assert summary.total_value_converted == Decimal("2430.00")
        assert summary.total_value == Decimal("1800.00")
        assert summary.change_pct == Decimal("20")
        assert summary.currency == "SGD"
        assert summary.asset_currency == "USD"

    def test_fractional_quantity(self):
        row = make_row(ticker="BTC", quantity="0.015", avg_buy_price="40000", current_price="43250")

        summary = calculate_investment_summary(row, Decimal("1"), "USD")

        assert summary.total_value == Decimal("648.75")

    def test_zero_avg_buy_price(self):
        row = make_row(avg_buy_price="0", current_price="50")

        summary = calculate_investment_summary(row, Decimal("1"), "USD")

        assert summary.change_pct == Decimal("0")

    def test_decimal_arithmetic_has_no_float_drift(self):
        row = make_row(quantity="3", avg_buy_price="0.1", current_price="0.1")

        summary = calculate_investment_summary(row, Decimal("1"), "USD")

        assert summary.total_value == Decimal("0.3")


# =============================================================================
# REPORT TESTS
# =============================================================================


class TestBuildPortfolioReport:
    """Tests for build_portfolio_report."""

    def test_two_usd_holdings(self):
        """
        GIVEN AAPL (10 @ 100, now 120) and GOOGL (5 @ 200, now 180) in USD
        WHEN the report is built in USD
        THEN total cost is 2000.00 and absolute change is 100.00
        """
        rows = [
            make_row("AAPL", "10", "100", "120"),
            make_row("GOOGL", "5", "200", "180"),
        ]

        report = build_portfolio_report(rows, {}, "USD")

        assert report.total_cost == Decimal("2000.00")
        assert report.absolute_change == Decimal("100.00")
        assert report.total_value == Decimal("2100.00")
        assert report.base_currency == "USD"
        assert [s.ticker for s in report.investments] == ["AAPL", "GOOGL"]
        assert report.warnings == []

    def test_each_holding_uses_its_own_rate(self):
        """
        GIVEN a USD holding and an SGD holding
        WHEN the report is built in EUR
        THEN each is converted at its own currency's rate
        """
        rows = [
            make_row("AAPL", "1", "100", "100", currency="USD"),
            make_row("DBS", "10", "30", "33", currency="SGD"),
        ]
        rates = {"USD": Decimal("0.9"), "SGD": Decimal("0.7")}

        report = build_portfolio_report(rows, rates, "EUR")

        # 100*0.9 + 300*0.7 and 100*0.9 + 330*0.7
        assert report.total_cost == Decimal("300.0")
        assert report.total_value == Decimal("321.0")
        assert report.absolute_change == Decimal("21.0")

    def test_base_currency_holding_ignores_map(self):
        rows = [make_row(currency="SGD")]

        report = build_portfolio_report(rows, {"SGD": Decimal("5")}, "SGD")

        assert report.investments[0].current_price_converted == Decimal("180.00")

    def test_missing_currency_defaults_to_usd(self):
        rows = [make_row(currency=None)]

        report = build_portfolio_report(rows, {"USD": Decimal("1.35")}, "SGD")

        assert report.investments[0].asset_currency == "USD"
        assert report.total_value == Decimal("2430.0000")

    def test_missing_rate_degrades_and_warns(self):
        """
        GIVEN a EUR holding and no EUR rate
        WHEN the report is built in SGD
        THEN the holding is valued unconverted, flagged and a warning is added
        """
        rows = [make_row(currency="EUR"), make_row("MSFT", currency="USD")]

        report = build_portfolio_report(rows, {"USD": Decimal("1.35")}, "SGD")

        eur, usd = report.investments
        assert eur.rate_missing is True
        assert eur.total_value_converted == Decimal("1800.00")
        assert usd.rate_missing is False
        assert len(report.warnings) == 1
        assert "EUR" in report.warnings[0]

    def test_empty_portfolio(self):
        report = build_portfolio_report([], {}, "usd")

        assert report.investments == []
        assert report.total_cost == Decimal("0")
        assert report.absolute_change == Decimal("0")
        assert report.base_currency == "USD"
