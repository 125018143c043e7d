"""Stub quote provider and FX fetcher for offline/testing use."""

import random
from decimal import Decimal
from typing import Optional

from networth.core.exceptions import RateUnavailableError
from networth.core.money import ONE, normalize_currency
from networth.domain.views import PriceQuote


# Deterministic fake prices for common tickers
_STUB_PRICES: dict[str, Decimal] = {
    "AAPL": Decimal("185.50"),
    "GOOGL": Decimal("142.75"),
    "MSFT": Decimal("378.25"),
    "AMZN": Decimal("178.50"),
    "TSLA": Decimal("248.75"),
    "NVDA": Decimal("485.25"),
    "META": Decimal("505.50"),
    "SPY": Decimal("485.25"),
    "QQQ": Decimal("418.75"),
    "BTC": Decimal("43250.00"),
    "ETH": Decimal("2280.40"),
}

# Units of currency per 1 USD
_STUB_USD_RATES: dict[str, Decimal] = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "GBP": Decimal("0.79"),
    "SGD": Decimal("1.35"),
    "JPY": Decimal("147.50"),
    "CAD": Decimal("1.34"),
    "AUD": Decimal("1.52"),
    "CHF": Decimal("0.88"),
}


class StubQuoteProvider:
    """
    Stub adapter with deterministic fake data for offline operation.

    Uses predefined prices for common tickers; generates a seeded random price
    for unknown ones. Always quotes in USD.
    """

    def __init__(self, seed: int = 42):
        """Initialize with optional random seed for reproducibility."""
        self._seed = seed

    def fetch_quote(self, ticker: str, api_ticker: str) -> PriceQuote:
        upper_ticker = ticker.upper()
        if upper_ticker in _STUB_PRICES:
            return PriceQuote(price=_STUB_PRICES[upper_ticker], currency="USD")

        # Same ticker always maps to the same price
        rng = random.Random(f"{self._seed}:{upper_ticker}")
        price = Decimal(str(50 + rng.random() * 200)).quantize(Decimal("0.01"))
        return PriceQuote(price=price, currency="USD")


class StubRateFetcher:
    """Deterministic, in-memory FX rates derived from a USD table."""

    def __init__(self, usd_rates: Optional[dict[str, Decimal]] = None):
        self._rates = dict(usd_rates or _STUB_USD_RATES)

    def get_rate(self, from_currency: str, to_currency: str) -> Decimal:
        source = normalize_currency(from_currency)
        target = normalize_currency(to_currency)
        if source == target:
            return ONE
        try:
            return self._rates[target] / self._rates[source]
        except KeyError as exc:
            raise RateUnavailableError(source, target, f"Unsupported currency: {exc.args[0]}") from exc
