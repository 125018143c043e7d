"""Crypto-aggregator adapter (CoinGecko): USD prices by coin id, plus coin icons."""

import logging
from typing import Optional, Union

import requests
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError as PydanticValidationError

from networth.core.exceptions import QuoteUnavailableError
from networth.core.money import to_decimal
from networth.domain.views import PriceQuote
from networth.providers.base import JsonHttpClient, UpstreamError

logger = logging.getLogger(__name__)


class CoinGeckoPrice(BaseModel):
    """One entry of GET /api/v3/simple/price?vs_currencies=usd."""

    model_config = ConfigDict(extra="ignore")

    usd: Optional[Union[float, str]] = None


class CoinGeckoImage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    thumb: Optional[str] = None
    small: Optional[str] = None
    large: Optional[str] = None


class CoinGeckoCoin(BaseModel):
    """The subset of GET /api/v3/coins/{id} we read."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    image: Optional[CoinGeckoImage] = None


_simple_price_adapter = TypeAdapter(dict[str, CoinGeckoPrice])


class CoinGeckoQuoteProvider(JsonHttpClient):
    """Quote and icon adapter keyed by CoinGecko coin id (e.g. "bitcoin")."""

    service_name = "CoinGecko API"

    def __init__(
        self,
        session: requests.Session,
        base_url: str = "https://api.coingecko.com",
        timeout_seconds: float = 5,
    ):
        super().__init__(session, base_url, timeout_seconds)

    def fetch_quote(self, ticker: str, api_ticker: str) -> PriceQuote:
        coin_id = api_ticker.strip().lower()
        try:
            payload = self._get_json(
                "/api/v3/simple/price",
                params={"ids": coin_id, "vs_currencies": "usd"},
            )
        except UpstreamError as exc:
            raise QuoteUnavailableError(ticker, str(exc)) from exc

        try:
            prices = _simple_price_adapter.validate_python(payload)
        except PydanticValidationError as exc:
            raise QuoteUnavailableError(ticker, f"Failed to parse CoinGecko response: {exc}") from exc

        entry = prices.get(coin_id)
        if entry is None or entry.usd is None:
            raise QuoteUnavailableError(ticker, f"No data found for {coin_id}")

        try:
            price = to_decimal(entry.usd)
        except ValueError as exc:
            raise QuoteUnavailableError(ticker, f"Failed to parse CoinGecko price: {exc}") from exc

        return PriceQuote(price=price, currency="USD")

    def fetch_icon(self, api_ticker: str) -> Optional[str]:
        """
        Return the largest available image URL for a coin, or None if it has none.

        Raises UpstreamError on transport or decoding failure; callers treat
        icons as cosmetic and log instead of propagating.
        """
        coin_id = api_ticker.strip().lower()
        payload = self._get_json(
            f"/api/v3/coins/{coin_id}",
            params={
                "localization": "false",
                "tickers": "false",
                "market_data": "false",
                "community_data": "false",
                "developer_data": "false",
            },
        )
        try:
            coin = CoinGeckoCoin.model_validate(payload)
        except PydanticValidationError as exc:
            raise UpstreamError(f"Failed to parse CoinGecko coin response: {exc}") from exc

        if coin.image is None:
            return None
        return coin.image.large or coin.image.small or coin.image.thumb
