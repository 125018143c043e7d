"""
Equity/FX quote adapter backed by Yahoo Finance via yfinance.

The instrument's native currency comes from the quote payload; USD when absent.
The lookup runs on a worker thread so it can be bounded by a timeout.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from networth.core.exceptions import QuoteUnavailableError
from networth.core.money import to_decimal
from networth.domain.views import PriceQuote

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "USD"


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


class YahooQuoteInfo(BaseModel):
    """The subset of a Yahoo quote payload we read. All fields are optional."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    regular_market_price: Optional[Union[float, str]] = Field(default=None, alias="regularMarketPrice")
    current_price: Optional[Union[float, str]] = Field(default=None, alias="currentPrice")
    currency: Optional[str] = None

    @property
    def price(self) -> Optional[Union[float, str]]:
        if self.regular_market_price is not None:
            return self.regular_market_price
        return self.current_price


def _fetch_info(api_ticker: str) -> Any:
    """One upstream call: the quote info mapping for a symbol."""
    yf = _get_yf()
    return yf.Ticker(api_ticker).info


class YahooQuoteProvider:
    """Quote adapter for equities and anything else Yahoo lists."""

    def __init__(self, timeout_seconds: float = 5):
        self._timeout = timeout_seconds

    def fetch_quote(self, ticker: str, api_ticker: str) -> PriceQuote:
        info = self._fetch_with_timeout(ticker, api_ticker)

        if not isinstance(info, dict) or not info:
            raise QuoteUnavailableError(ticker, f"No data found for {api_ticker}")

        try:
            parsed = YahooQuoteInfo.model_validate(info)
        except PydanticValidationError as exc:
            raise QuoteUnavailableError(ticker, f"Failed to parse Yahoo response: {exc}") from exc

        if parsed.price is None:
            raise QuoteUnavailableError(ticker, f"No price in Yahoo response for {api_ticker}")

        try:
            price = to_decimal(parsed.price)
        except ValueError as exc:
            raise QuoteUnavailableError(ticker, f"Failed to parse price: {exc}") from exc

        currency = (parsed.currency or "").strip().upper() or DEFAULT_CURRENCY
        return PriceQuote(price=price, currency=currency)

    def _fetch_with_timeout(self, ticker: str, api_ticker: str) -> Any:
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(_fetch_info, api_ticker)
            return future.result(timeout=self._timeout)
        except FuturesTimeoutError as exc:
            raise QuoteUnavailableError(
                ticker, f"Yahoo Finance timed out after {self._timeout}s"
            ) from exc
        except Exception as exc:
            # yfinance surfaces HTTP, decoding and lookup failures as assorted exception types
            raise QuoteUnavailableError(ticker, f"Yahoo Finance request failed: {exc}") from exc
        finally:
            # Do not block on a hung call; the worker finishes in the background.
            executor.shutdown(wait=False)
