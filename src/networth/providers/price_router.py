"""Dispatch a price request to the adapter pinned for the asset."""

import logging
from typing import Mapping, Optional

from networth.core.exceptions import UnsupportedProviderError
from networth.domain.models import PriceSource
from networth.domain.views import PriceQuote
from networth.providers.base import QuoteProvider

logger = logging.getLogger(__name__)


class PriceRouter:
    """
    Routes (ticker, api_ticker, provider_id) to exactly one quote adapter.

    There is no cross-provider fallback: if the pinned adapter fails, its
    QuoteUnavailableError propagates unchanged.
    """

    def __init__(self, adapters: Mapping[PriceSource, QuoteProvider]):
        self._adapters = dict(adapters)

    def resolve_price(
        self,
        ticker: str,
        provider_symbol: str,
        provider_id: Optional[str],
    ) -> PriceQuote:
        source = PriceSource.parse(provider_id)
        adapter = self._adapters.get(source) if source is not None else None
        if adapter is None:
            raise UnsupportedProviderError(provider_id)

        logger.debug("Fetching %s (%s) from %s", ticker, provider_symbol, source.value)
        return adapter.fetch_quote(ticker, provider_symbol)
