"""Application context: process-wide caches, HTTP session and upstream adapters.

Built once at startup and shared by every request. Per-request objects
(database session, repositories, services) are assembled around it.
"""

import logging
from decimal import Decimal
from typing import Optional

import requests
from sqlalchemy.orm import Session

from networth.config.settings import Settings, get_settings
from networth.domain.models import PriceSource
from networth.providers import (
    BinanceQuoteProvider,
    CoinGeckoQuoteProvider,
    FrankfurterRateFetcher,
    IconProvider,
    PriceRouter,
    RateFetcher,
    StubQuoteProvider,
    StubRateFetcher,
    YahooQuoteProvider,
    build_http_session,
)
from networth.repositories.sqlalchemy import (
    SqlAlchemyAssetRepository,
    SqlAlchemyHoldingRepository,
    SqlAlchemySettingsRepository,
)
from networth.services import MarketDataService, PortfolioService, TTLCache

logger = logging.getLogger(__name__)


class AppContext:
    """
    Explicit container for the long-lived pieces of the price engine.

    Owns the shared HTTP session, the price and FX caches, the price router
    and the FX fetcher. There are no module-level caches: two contexts never
    share state.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        price_router: Optional[PriceRouter] = None,
        rate_fetcher: Optional[RateFetcher] = None,
        icon_provider: Optional[IconProvider] = None,
    ):
        self.settings = settings or get_settings()
        self.http_session: Optional[requests.Session] = None

        self.price_cache: TTLCache[Decimal] = TTLCache(
            self.settings.price_cache_ttl_seconds, name="price_cache"
        )
        self.fx_cache: TTLCache[Decimal] = TTLCache(
            self.settings.fx_cache_ttl_seconds, name="fx_cache"
        )

        if self.settings.use_stub_provider:
            logger.info("Using stub providers (offline mode)")
            self.price_router = price_router or self._build_stub_router()
            self.rate_fetcher = rate_fetcher or StubRateFetcher()
            self.icon_provider = icon_provider
        else:
            if price_router is None or rate_fetcher is None or icon_provider is None:
                self.http_session = build_http_session(self.settings.http_user_agent)
            coingecko = None
            if price_router is None or icon_provider is None:
                coingecko = CoinGeckoQuoteProvider(
                    self.http_session,
                    base_url=self.settings.coingecko_base_url,
                    timeout_seconds=self.settings.http_timeout_seconds,
                )
            self.price_router = price_router or self._build_router(coingecko)
            self.rate_fetcher = rate_fetcher or FrankfurterRateFetcher(
                self.http_session,
                base_url=self.settings.frankfurter_base_url,
                timeout_seconds=self.settings.http_timeout_seconds,
            )
            self.icon_provider = icon_provider or coingecko

    def _build_router(self, coingecko: CoinGeckoQuoteProvider) -> PriceRouter:
        return PriceRouter(
            {
                PriceSource.YAHOO: YahooQuoteProvider(
                    timeout_seconds=self.settings.http_timeout_seconds
                ),
                PriceSource.BINANCE: BinanceQuoteProvider(
                    self.http_session,
                    base_url=self.settings.binance_base_url,
                    timeout_seconds=self.settings.http_timeout_seconds,
                ),
                PriceSource.COINGECKO: coingecko,
            }
        )

    @staticmethod
    def _build_stub_router() -> PriceRouter:
        stub = StubQuoteProvider()
        return PriceRouter({source: stub for source in PriceSource})

    # Per-request assembly

    def market_data(self, db: Session) -> MarketDataService:
        """MarketDataService bound to a database session, sharing this context's caches."""
        return MarketDataService(
            price_router=self.price_router,
            asset_repo=SqlAlchemyAssetRepository(db),
            price_cache=self.price_cache,
            fx_cache=self.fx_cache,
            rate_fetcher=self.rate_fetcher,
            icon_provider=self.icon_provider,
            max_workers=self.settings.refresh_max_workers,
        )

    def portfolio(self, db: Session) -> PortfolioService:
        """PortfolioService bound to a database session."""
        return PortfolioService(
            holding_repo=SqlAlchemyHoldingRepository(db),
            settings_repo=SqlAlchemySettingsRepository(
                db, default_base_currency=self.settings.default_base_currency
            ),
            market_data_service=self.market_data(db),
        )

    def close(self) -> None:
        """Release the HTTP session."""
        if self.http_session is not None:
            self.http_session.close()
            self.http_session = None
