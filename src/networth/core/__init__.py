"""Core utilities and shared functionality."""

from networth.core.timezone import (
    now_eastern,
    to_eastern,
    to_storage,
    EASTERN_TZ,
)
from networth.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    UnsupportedProviderError,
    QuoteUnavailableError,
    RateUnavailableError,
)
from networth.core.money import (
    to_decimal,
    round_money,
    normalize_currency,
    normalize_ticker,
)

__all__ = [
    "now_eastern",
    "to_eastern",
    "to_storage",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "UnsupportedProviderError",
    "QuoteUnavailableError",
    "RateUnavailableError",
    "to_decimal",
    "round_money",
    "normalize_currency",
    "normalize_ticker",
]
