"""
Unit tests for AppContext wiring and settings.
"""

from decimal import Decimal

from networth.app_context import AppContext
from networth.config.settings import Settings
from networth.domain.models import PriceSource
from networth.providers import (
    CoinGeckoQuoteProvider,
    FrankfurterRateFetcher,
    StubRateFetcher,
)


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.price_cache_ttl_seconds == 3
        assert settings.fx_cache_ttl_seconds == 60
        assert settings.http_timeout_seconds == 5
        assert settings.default_base_currency == "USD"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("NETWORTH_PRICE_CACHE_TTL_SECONDS", "10")
        monkeypatch.setenv("NETWORTH_USE_STUB_PROVIDER", "true")

        settings = Settings(_env_file=None)

        assert settings.price_cache_ttl_seconds == 10
        assert settings.use_stub_provider is True

    def test_database_url_from_data_dir(self, tmp_path):
        settings = Settings(_env_file=None, data_dir=tmp_path)

        assert settings.get_database_url() == f"sqlite:///{tmp_path / 'networth.db'}"


class TestAppContext:
    """Tests for AppContext construction."""

    def test_live_wiring(self):
        """
        GIVEN default settings
        WHEN the context is built
        THEN all three quote providers, Frankfurter and CoinGecko icons are wired
        """
        context = AppContext(Settings(_env_file=None))
        try:
            assert context.http_session is not None
            assert set(context.price_router._adapters) == set(PriceSource)
            assert isinstance(context.rate_fetcher, FrankfurterRateFetcher)
            assert isinstance(context.icon_provider, CoinGeckoQuoteProvider)
            assert context.price_cache.ttl_seconds == 3
            assert context.fx_cache.ttl_seconds == 60
        finally:
            context.close()
        assert context.http_session is None

    def test_stub_wiring(self, test_session):
        """
        GIVEN use_stub_provider enabled
        WHEN a price and a rate are requested
        THEN the stub answers without any HTTP session
        """
        context = AppContext(Settings(_env_file=None, use_stub_provider=True))

        market = context.market_data(test_session)

        assert context.http_session is None
        assert isinstance(context.rate_fetcher, StubRateFetcher)
        assert market.get_price("AAPL") == Decimal("185.50")
        assert market.get_rate("USD", "SGD") == Decimal("1.35")

    def test_contexts_do_not_share_caches(self):
        first = AppContext(Settings(_env_file=None, use_stub_provider=True))
        second = AppContext(Settings(_env_file=None, use_stub_provider=True))

        first.price_cache.put("AAPL", Decimal("1"))

        assert second.price_cache.get("AAPL") is None
