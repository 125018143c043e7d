"""Catalog timestamps in US/Eastern market time.

Times are stored naive (Eastern wall clock) and handed back timezone-aware.
"""

from datetime import datetime
from typing import Optional

import pytz

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def to_eastern(dt: Optional[datetime]) -> Optional[datetime]:
    """Make a stored timestamp aware; naive values are taken as Eastern wall clock."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return EASTERN_TZ.localize(dt)
    return dt.astimezone(EASTERN_TZ)


def to_storage(dt: Optional[datetime]) -> Optional[datetime]:
    """Naive Eastern wall-clock value for a DateTime column."""
    if dt is None:
        return None
    return to_eastern(dt).replace(tzinfo=None)
