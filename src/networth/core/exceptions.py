"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class UnsupportedProviderError(AppError):
    """Raised when an asset is configured with a price source nobody handles.

    This is a catalog configuration defect and is never retried.
    """

    status_code = 500

    def __init__(self, provider_id: Optional[str]):
        self.provider_id = provider_id
        super().__init__(
            f"Unsupported price provider: {provider_id!r}",
            code="UNSUPPORTED_PROVIDER",
        )


class QuoteUnavailableError(AppError):
    """Raised when an upstream quote service cannot produce a price for a ticker."""

    def __init__(self, ticker: str, cause: str):
        self.ticker = ticker
        self.cause = cause
        super().__init__(
            f"Ticker not valid or price unavailable for {ticker}: {cause}",
            code="QUOTE_UNAVAILABLE",
        )


class RateUnavailableError(AppError):
    """Raised when the FX service cannot produce a rate for a currency pair."""

    status_code = 502

    def __init__(self, from_currency: str, to_currency: str, cause: str):
        self.from_currency = from_currency
        self.to_currency = to_currency
        self.cause = cause
        super().__init__(
            f"Exchange rate unavailable for {from_currency} -> {to_currency}: {cause}",
            code="RATE_UNAVAILABLE",
        )
