"""Crypto-exchange quote adapter (Binance spot ticker). Prices are USD-denominated."""

from typing import Optional, Union

import requests
from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from networth.core.exceptions import QuoteUnavailableError
from networth.core.money import to_decimal
from networth.domain.views import PriceQuote
from networth.providers.base import JsonHttpClient, UpstreamError


class BinanceTicker(BaseModel):
    """GET /api/v3/ticker/price payload; price comes back as a string, e.g. "0.69300000"."""

    model_config = ConfigDict(extra="ignore")

    symbol: Optional[str] = None
    price: Union[str, float]


class BinanceQuoteProvider(JsonHttpClient):
    """Quote adapter for exchange pairs such as BTCUSDT."""

    service_name = "Binance API"

    def __init__(
        self,
        session: requests.Session,
        base_url: str = "https://api.binance.com",
        timeout_seconds: float = 5,
    ):
        super().__init__(session, base_url, timeout_seconds)

    def fetch_quote(self, ticker: str, api_ticker: str) -> PriceQuote:
        symbol = api_ticker.strip().upper()
        try:
            payload = self._get_json("/api/v3/ticker/price", params={"symbol": symbol})
        except UpstreamError as exc:
            raise QuoteUnavailableError(ticker, str(exc)) from exc

        try:
            data = BinanceTicker.model_validate(payload)
        except PydanticValidationError as exc:
            raise QuoteUnavailableError(ticker, f"Failed to parse Binance response: {exc}") from exc

        try:
            price = to_decimal(data.price)
        except ValueError as exc:
            raise QuoteUnavailableError(
                ticker, f"Failed to parse Binance price {data.price!r}"
            ) from exc

        return PriceQuote(price=price, currency="USD")
