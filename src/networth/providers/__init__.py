"""Upstream quote, icon and FX providers."""

from networth.providers.base import (
    QuoteProvider,
    IconProvider,
    RateFetcher,
    UpstreamError,
    build_http_session,
)
from networth.providers.yahoo_provider import YahooQuoteProvider
from networth.providers.binance_provider import BinanceQuoteProvider
from networth.providers.coingecko_provider import CoinGeckoQuoteProvider
from networth.providers.frankfurter import FrankfurterRateFetcher
from networth.providers.price_router import PriceRouter
from networth.providers.stub_provider import StubQuoteProvider, StubRateFetcher

__all__ = [
    "QuoteProvider",
    "IconProvider",
    "RateFetcher",
    "UpstreamError",
    "build_http_session",
    "YahooQuoteProvider",
    "BinanceQuoteProvider",
    "CoinGeckoQuoteProvider",
    "FrankfurterRateFetcher",
    "PriceRouter",
    "StubQuoteProvider",
    "StubRateFetcher",
]
