"""Provider protocols and shared HTTP plumbing for upstream services."""

import logging
from decimal import Decimal
from typing import Any, Optional, Protocol

import requests

from networth.domain.views import PriceQuote

logger = logging.getLogger(__name__)


class QuoteProvider(Protocol):
    """
    Protocol for quote provider adapters.

    Implementations make exactly one upstream call per quote and never retry
    or fall back. Any failure is raised as QuoteUnavailableError.
    """

    def fetch_quote(self, ticker: str, api_ticker: str) -> PriceQuote:
        """Fetch the current native price for `api_ticker` (reported as `ticker`)."""
        ...


class IconProvider(Protocol):
    """Protocol for looking up an asset's display icon."""

    def fetch_icon(self, api_ticker: str) -> Optional[str]:
        """Return an icon URL, or None when the upstream has none."""
        ...


class RateFetcher(Protocol):
    """Protocol for foreign-exchange rate lookups."""

    def get_rate(self, from_currency: str, to_currency: str) -> Decimal:
        """Return `rate` such that amount_in_to = amount_in_from * rate."""
        ...


class UpstreamError(RuntimeError):
    """Transport, status or decoding failure talking to an upstream service."""


def build_http_session(user_agent: str) -> requests.Session:
    """Create the process-wide HTTP session used by all JSON adapters."""
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})
    return session


class JsonHttpClient:
    """Base for adapters that issue a single GET and decode a JSON body."""

    service_name = "upstream"

    def __init__(
        self,
        session: requests.Session,
        base_url: str,
        timeout_seconds: float = 5,
    ):
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds

    def _get_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        """
        GET `path` and return the decoded JSON payload.

        Raises UpstreamError on connection errors, timeouts, non-2xx status
        or a body that is not JSON.
        """
        url = f"{self._base_url}{path}"
        try:
            resp = self._session.get(url, params=params, timeout=self._timeout)
        except requests.Timeout as exc:
            raise UpstreamError(
                f"{self.service_name} timed out after {self._timeout}s"
            ) from exc
        except requests.RequestException as exc:
            raise UpstreamError(f"{self.service_name} connection failed: {exc}") from exc

        if not resp.ok:
            logger.debug("%s returned %s for %s: %s", self.service_name, resp.status_code, url, resp.text[:200])
            raise UpstreamError(f"{self.service_name} returned error {resp.status_code}")

        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamError(f"Failed to parse {self.service_name} response") from exc
