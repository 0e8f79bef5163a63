"""Time-based in-memory cache for the candidate set.

Holds a single value and the time it was stored. The slot is replaced
wholesale on ``put``, so readers never see a half-written entry.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Generic, TypeVar

from mockevm.models import CACHE_TTL_S

T = TypeVar("T")


class TimedCache(Generic[T]):
    """A single-slot cache that expires after ``ttl_s`` seconds.

    Args:
        ttl_s: Freshness window in seconds.
        clock: Monotonic time source; injectable for tests.
    """

    def __init__(
        self,
        ttl_s: float = CACHE_TTL_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_s = ttl_s
        self._clock = clock
        self._entry: tuple[T, float] | None = None

    def get(self) -> T | None:
        """Return the cached value if it is still fresh, else None."""
        entry = self._entry
        if entry is None:
            return None
        value, stored_at = entry
        if self._clock() - stored_at < self.ttl_s:
            return value
        return None

    def put(self, value: T) -> None:
        """Store *value* stamped with the current time."""
        self._entry = (value, self._clock())

    def clear(self) -> None:
        self._entry = None

    def age(self) -> float | None:
        """Seconds since the last ``put``, or None if empty."""
        entry = self._entry
        if entry is None:
            return None
        return self._clock() - entry[1]
