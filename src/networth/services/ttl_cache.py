"""Time-bounded read-through cache for prices and exchange rates."""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    value: V
    expires_at: float


class TTLCache(Generic[V]):
    """
    String-keyed cache whose entries expire a fixed time after being stored.

    - Expiry is passive: a stale entry is ignored (and dropped) when read.
    - Only successful fetches are stored; a failed fetch leaves the key empty
      so the next caller goes upstream again.
    - Safe for concurrent use. The lock only guards the map; fetches run
      outside it, so concurrent misses for one key may each call upstream.

    One instance per concern is created at process start and shared by
    reference; nothing resets it besides TTL expiry.
    """

    def __init__(
        self,
        ttl_seconds: float,
        name: str = "cache",
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._ttl = ttl_seconds
        self._name = name
        self._clock = clock
        self._entries: dict[str, CacheEntry[V]] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: str) -> Optional[V]:
        """Return the cached value for `key` if present and not expired."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at <= now:
                del self._entries[key]
                return None
            return entry.value

    def put(self, key: str, value: V) -> None:
        """Store `value` under `key`, replacing any previous entry."""
        entry = CacheEntry(value=value, expires_at=self._clock() + self._ttl)
        with self._lock:
            self._entries[key] = entry

    def get_or_fetch(self, key: str, fetch_fn: Callable[[], V]) -> V:
        """
        Return the cached value, or call `fetch_fn`, store its result and return it.

        Exceptions from `fetch_fn` propagate and nothing is cached.
        """
        cached = self.get(key)
        if cached is not None:
            logger.debug("%s HIT for %s", self._name, key)
            return cached

        logger.debug("%s MISS for %s", self._name, key)
        value = fetch_fn()
        self.put(key, value)
        return value

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
