"""Market data service: cached prices and FX rates, and bulk price refresh."""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from decimal import Decimal
from typing import Iterable, Optional

from networth.core.exceptions import RateUnavailableError
from networth.core.money import ONE, normalize_currency
from networth.domain.models import Asset, PriceSource
from networth.providers.base import IconProvider, RateFetcher
from networth.providers.price_router import PriceRouter
from networth.repositories.protocols import AssetRepository
from networth.services.ttl_cache import TTLCache

logger = logging.getLogger(__name__)


class MarketDataService:
    """
    Caller-facing access to prices and exchange rates.

    Wraps the price router and FX fetcher with their caches. A price fetched
    on a cache miss is also written back to the asset catalog as the ticker's
    last known price.
    """

    def __init__(
        self,
        price_router: PriceRouter,
        asset_repo: AssetRepository,
        price_cache: TTLCache[Decimal],
        fx_cache: TTLCache[Decimal],
        rate_fetcher: RateFetcher,
        icon_provider: Optional[IconProvider] = None,
        max_workers: int = 8,
    ):
        self._router = price_router
        self._asset_repo = asset_repo
        self._price_cache = price_cache
        self._fx_cache = fx_cache
        self._rate_fetcher = rate_fetcher
        self._icon_provider = icon_provider
        self._max_workers = max(1, max_workers)

    # Prices

    def get_price(self, ticker: str) -> Decimal:
        """
        Current price for a ticker, from cache or upstream.

        Failures propagate (QuoteUnavailableError, UnsupportedProviderError):
        a caller that needs one price cannot proceed without it.
        """
        return self.ensure_price_fresh(ticker)

    def ensure_price_fresh(self, ticker: str) -> Decimal:
        """Return a price no older than the price cache TTL, fetching and persisting on a miss."""
        ticker = ticker.strip().upper()
        return self._price_cache.get_or_fetch(ticker, lambda: self._fetch_and_persist(ticker))

    def refresh_all(self, tickers: Iterable[str]) -> int:
        """
        Make sure every distinct ticker has a fresh price.

        All refreshes are submitted at once and awaited together. A failure
        for one ticker is logged and does not affect the others. Returns the
        number of tickers attempted, not the number that succeeded.
        """
        distinct = sorted({t.strip().upper() for t in tickers if t and t.strip()})
        if not distinct:
            return 0

        workers = min(self._max_workers, len(distinct))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="price-refresh") as pool:
            futures = {pool.submit(self.ensure_price_fresh, ticker): ticker for ticker in distinct}
            wait(futures)

        for future, ticker in futures.items():
            exc = future.exception()
            if exc is not None:
                logger.error("Failed to refresh price for %s: %s", ticker, exc)

        return len(distinct)

    def _fetch_and_persist(self, ticker: str) -> Decimal:
        asset = self._asset_repo.get_asset(ticker)
        if asset is not None:
            api_ticker = asset.api_ticker or ticker
            source = asset.source or PriceSource.YAHOO.value
            if asset.icon_url is None and PriceSource.parse(source) == PriceSource.COINGECKO:
                self._populate_icon(asset, api_ticker)
        else:
            # Not in the catalog (legacy rows): price it from Yahoo under its own name
            logger.info("No catalog entry for %s, defaulting to %s", ticker, PriceSource.YAHOO.value)
            api_ticker = ticker
            source = PriceSource.YAHOO.value

        quote = self._router.resolve_price(ticker, api_ticker, source)

        try:
            self._asset_repo.update_asset_price(ticker, quote.price, quote.currency)
        except Exception:
            # Non-fatal: the fetched price is still cached and returned
            logger.exception("Failed to persist price for %s", ticker)

        return quote.price

    def _populate_icon(self, asset: Asset, api_ticker: str) -> None:
        """Best-effort lazy icon lookup. Never raises."""
        if self._icon_provider is None:
            return

        logger.info("Missing icon for %s, fetching...", asset.ticker)
        try:
            url = self._icon_provider.fetch_icon(api_ticker)
        except Exception as exc:
            logger.error("Failed to fetch icon for %s: %s", asset.ticker, exc)
            return

        if not url:
            logger.warning("No icon found for %s", asset.ticker)
            return

        try:
            self._asset_repo.update_asset_icon(asset.ticker, url)
        except Exception:
            logger.exception("Failed to save icon for %s", asset.ticker)
            return
        logger.info("Updated icon for %s", asset.ticker)

    def list_assets(self) -> list[Asset]:
        """The asset catalog: every ticker that can be held."""
        return self._asset_repo.list_assets()

    # Exchange rates

    def get_rate(self, from_currency: str, to_currency: str) -> Decimal:
        """
        Rate converting from_currency into to_currency, from cache or upstream.

        Identical currencies return 1 without touching the cache or network.
        """
        try:
            source = normalize_currency(from_currency)
            target = normalize_currency(to_currency)
        except ValueError as exc:
            raise RateUnavailableError(from_currency, to_currency, str(exc)) from exc

        if source == target:
            return ONE

        return self._fx_cache.get_or_fetch(
            f"{source}_{target}",
            lambda: self._rate_fetcher.get_rate(source, target),
        )

    def get_rates(
        self,
        currencies: Iterable[str],
        base_currency: str,
    ) -> tuple[dict[str, Decimal], list[str]]:
        """
        Rates into base_currency for each currency.

        Returns (rates, unavailable). A currency whose lookup failed is left
        out of `rates` and listed in `unavailable`.
        """
        rates: dict[str, Decimal] = {}
        unavailable: list[str] = []
        for currency in sorted(set(currencies)):
            try:
                rates[currency] = self.get_rate(currency, base_currency)
            except RateUnavailableError as exc:
                logger.error("Exchange rate lookup failed: %s", exc.message)
                unavailable.append(currency)
        return rates, unavailable
