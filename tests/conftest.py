"""
Pytest configuration and fixtures for the net worth tracker tests.

This module provides:
- In-memory SQLite database fixtures
- A controllable clock for cache expiry tests
- Deterministic fake quote, FX and icon providers with call counters
- Service and repository fixtures
- An API test client wired to the fakes
"""

import threading
from decimal import Decimal
from typing import Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from networth.app_context import AppContext
from networth.config.settings import Settings, reset_settings, set_settings
from networth.core.exceptions import QuoteUnavailableError, RateUnavailableError
from networth.domain.models import Asset, PriceSource
from networth.domain.views import PriceQuote
from networth.main import create_app
from networth.providers import PriceRouter
from networth.repositories.sqlalchemy.database import Base, get_db, reset_database
from networth.repositories.sqlalchemy.seed import seed_currencies
# Import ORM models to register them with Base before creating tables
from networth.repositories.sqlalchemy import orm_models  # noqa: F401
from networth.repositories.sqlalchemy import (
    SqlAlchemyAssetRepository,
    SqlAlchemyHoldingRepository,
    SqlAlchemySettingsRepository,
)
from networth.services import MarketDataService, PortfolioService, TTLCache


# =============================================================================
# CLOCK
# =============================================================================


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# FAKE UPSTREAMS
# =============================================================================


class FakeQuoteProvider:
    """
    Quote adapter with fixed prices keyed by api_ticker.

    Unknown symbols and symbols listed in `failing` raise QuoteUnavailableError.
    Every call is recorded.
    """

    def __init__(
        self,
        prices: Optional[dict[str, Decimal]] = None,
        currency: str = "USD",
        currencies: Optional[dict[str, str]] = None,
    ):
        self.prices = dict(prices or {})
        self.currency = currency
        self.currencies = dict(currencies or {})
        self.failing: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def fetch_quote(self, ticker: str, api_ticker: str) -> PriceQuote:
        with self._lock:
            self.calls.append((ticker, api_ticker))
        if api_ticker in self.failing or api_ticker not in self.prices:
            raise QuoteUnavailableError(ticker, f"No data found for {api_ticker}")
        return PriceQuote(
            price=self.prices[api_ticker],
            currency=self.currencies.get(api_ticker, self.currency),
        )

    def call_count(self, api_ticker: Optional[str] = None) -> int:
        if api_ticker is None:
            return len(self.calls)
        return sum(1 for _, symbol in self.calls if symbol == api_ticker)


class FakeRateFetcher:
    """FX fetcher with fixed rates keyed by (from, to)."""

    def __init__(self, rates: Optional[dict[tuple[str, str], Decimal]] = None):
        self.rates = dict(rates or {})
        self.calls: list[tuple[str, str]] = []

    def get_rate(self, from_currency: str, to_currency: str) -> Decimal:
        self.calls.append((from_currency, to_currency))
        rate = self.rates.get((from_currency, to_currency))
        if rate is None:
            raise RateUnavailableError(from_currency, to_currency, "No rate found")
        return rate


class FakeIconProvider:
    """Icon lookup returning a fixed URL, or raising when `error` is set."""

    def __init__(self, url: Optional[str] = "https://img.example/coin.png"):
        self.url = url
        self.error: Optional[Exception] = None
        self.calls: list[str] = []

    def fetch_icon(self, api_ticker: str) -> Optional[str]:
        self.calls.append(api_ticker)
        if self.error is not None:
            raise self.error
        return self.url


@pytest.fixture
def yahoo_provider() -> FakeQuoteProvider:
    return FakeQuoteProvider(
        prices={
            "AAPL": Decimal("185.50"),
            "MSFT": Decimal("378.25"),
            "D05.SI": Decimal("33.10"),
        },
        currencies={"D05.SI": "SGD"},
    )


@pytest.fixture
def binance_provider() -> FakeQuoteProvider:
    return FakeQuoteProvider(prices={"BTCUSDT": Decimal("43250.00")})


@pytest.fixture
def coingecko_provider() -> FakeQuoteProvider:
    return FakeQuoteProvider(prices={"ethereum": Decimal("2280.40")})


@pytest.fixture
def price_router(yahoo_provider, binance_provider, coingecko_provider) -> PriceRouter:
    return PriceRouter(
        {
            PriceSource.YAHOO: yahoo_provider,
            PriceSource.BINANCE: binance_provider,
            PriceSource.COINGECKO: coingecko_provider,
        }
    )


@pytest.fixture
def rate_fetcher() -> FakeRateFetcher:
    return FakeRateFetcher(
        rates={
            ("USD", "SGD"): Decimal("1.35"),
            ("SGD", "USD"): Decimal("0.74"),
            ("USD", "EUR"): Decimal("0.92"),
        }
    )


@pytest.fixture
def icon_provider() -> FakeIconProvider:
    return FakeIconProvider()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session with the supported currencies loaded."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    seed_currencies(session)
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def asset_repo(test_session) -> SqlAlchemyAssetRepository:
    return SqlAlchemyAssetRepository(test_session)


@pytest.fixture
def holding_repo(test_session) -> SqlAlchemyHoldingRepository:
    return SqlAlchemyHoldingRepository(test_session)


@pytest.fixture
def settings_repo(test_session) -> SqlAlchemySettingsRepository:
    return SqlAlchemySettingsRepository(test_session, default_base_currency="USD")


CATALOG = [
    Asset(ticker="AAPL", name="Apple Inc.", api_ticker="AAPL", source="YAHOO", current_price=Decimal("180.00"), currency="USD"),
    Asset(ticker="MSFT", name="Microsoft", api_ticker="MSFT", source="YAHOO", current_price=Decimal("370.00"), currency="USD"),
    Asset(ticker="DBS", name="DBS Group", api_ticker="D05.SI", source="YAHOO", current_price=Decimal("32.00"), currency="SGD"),
    Asset(ticker="BTC", name="Bitcoin", asset_type="Crypto", api_ticker="BTCUSDT", source="BINANCE", current_price=Decimal("40000.00"), currency="USD"),
    Asset(ticker="ETH", name="Ethereum", asset_type="Crypto", api_ticker="ethereum", source="coingecko", current_price=Decimal("2000.00"), currency="USD"),
    Asset(ticker="ODD", name="Misconfigured", api_ticker="ODD", source="KRAKEN", current_price=Decimal("1.00"), currency="USD"),
]


@pytest.fixture
def catalog(asset_repo) -> dict[str, Asset]:
    """Seed the asset catalog."""
    return {asset.ticker: asset_repo.upsert_asset(asset) for asset in CATALOG}


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def price_cache(clock) -> TTLCache:
    return TTLCache(3, name="price_cache", clock=clock)


@pytest.fixture
def fx_cache(clock) -> TTLCache:
    return TTLCache(60, name="fx_cache", clock=clock)


@pytest.fixture
def market_data_service(
    price_router,
    asset_repo,
    price_cache,
    fx_cache,
    rate_fetcher,
    icon_provider,
) -> MarketDataService:
    return MarketDataService(
        price_router=price_router,
        asset_repo=asset_repo,
        price_cache=price_cache,
        fx_cache=fx_cache,
        rate_fetcher=rate_fetcher,
        icon_provider=icon_provider,
        max_workers=4,
    )


@pytest.fixture
def portfolio_service(holding_repo, settings_repo, market_data_service) -> PortfolioService:
    return PortfolioService(
        holding_repo=holding_repo,
        settings_repo=settings_repo,
        market_data_service=market_data_service,
    )


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def app_context(price_router, rate_fetcher, icon_provider) -> AppContext:
    settings = Settings(database_url="sqlite://", use_stub_provider=False)
    return AppContext(
        settings,
        price_router=price_router,
        rate_fetcher=rate_fetcher,
        icon_provider=icon_provider,
    )


@pytest.fixture
def client(test_engine, app_context, catalog) -> TestClient:
    """Provide FastAPI test client with test database and fake upstreams."""
    set_settings(app_context.settings)
    reset_database()
    app = create_app(context=app_context)
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


@pytest.fixture
def user_headers() -> dict[str, str]:
    return {"X-User-Id": "user-1"}


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.0001"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"
