"""Decimal helpers for monetary values.

Upstream services hand back prices as JSON floats or strings. They are
converted to Decimal here, once, and never turned back into floats.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

CENTS = Decimal("0.01")
ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")

Numeric = Union[Decimal, int, float, str]


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert an upstream numeric value to Decimal.

    Floats go through str() so 0.1 stays 0.1 instead of its binary expansion.
    Raises ValueError for booleans, NaN, Infinity and anything unparsable.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a numeric value: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a numeric value: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Non-finite numeric value: {value!r}")
    return result


def round_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places for presentation (banker's rounding)."""
    return value.quantize(CENTS)


def normalize_currency(value: str) -> str:
    """Normalize an ISO 4217 code: strip and uppercase; must be 3 letters."""
    normalized = (value or "").strip().upper()
    if len(normalized) != 3 or not normalized.isalpha():
        raise ValueError(f"Currency must be a 3-letter ISO 4217 code, got {value!r}")
    return normalized


def normalize_ticker(value: Optional[str]) -> Optional[str]:
    """Normalize ticker: strip whitespace and uppercase; None or empty -> None."""
    if value is None:
        return None
    stripped = value.strip().upper()
    return stripped if stripped else None
