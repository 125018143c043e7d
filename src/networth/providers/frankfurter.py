"""FX rate fetcher backed by the Frankfurter API. Single authoritative upstream, no fallback."""

from decimal import Decimal
from typing import Union

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from networth.core.exceptions import RateUnavailableError
from networth.core.money import ONE, normalize_currency, to_decimal
from networth.providers.base import JsonHttpClient, UpstreamError


class FrankfurterLatest(BaseModel):
    """GET /latest?from=USD&to=SGD payload."""

    model_config = ConfigDict(extra="ignore")

    base: str = ""
    rates: dict[str, Union[float, str]] = Field(default_factory=dict)


class FrankfurterRateFetcher(JsonHttpClient):
    """Resolves a conversion rate between two ISO currency codes."""

    service_name = "Frankfurter API"

    def __init__(
        self,
        session: requests.Session,
        base_url: str = "https://api.frankfurter.app",
        timeout_seconds: float = 5,
    ):
        super().__init__(session, base_url, timeout_seconds)

    def get_rate(self, from_currency: str, to_currency: str) -> Decimal:
        try:
            source = normalize_currency(from_currency)
            target = normalize_currency(to_currency)
        except ValueError as exc:
            raise RateUnavailableError(from_currency, to_currency, str(exc)) from exc

        if source == target:
            return ONE

        try:
            payload = self._get_json("/latest", params={"from": source, "to": target})
        except UpstreamError as exc:
            raise RateUnavailableError(source, target, str(exc)) from exc

        try:
            data = FrankfurterLatest.model_validate(payload)
        except PydanticValidationError as exc:
            raise RateUnavailableError(
                source, target, f"Failed to parse Frankfurter response: {exc}"
            ) from exc

        raw_rate = data.rates.get(target)
        if raw_rate is None:
            raise RateUnavailableError(source, target, f"No rate found for {source} -> {target}")

        try:
            rate = to_decimal(raw_rate)
        except ValueError as exc:
            raise RateUnavailableError(source, target, f"Failed to parse exchange rate: {exc}") from exc

        if rate <= 0:
            raise RateUnavailableError(source, target, f"Non-positive exchange rate {rate}")
        return rate
