"""Time-bounded cache for catalog reads.

Built once at the composition root and passed to the handlers that read
or change the catalog.  The clock is injectable so expiry can be tested
without sleeping.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Hashable

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0


@dataclass
class _Entry:
    value: Any
    stored_at: float


class TtlCache:

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl < 0:
            raise ValueError("Cache TTL cannot be negative")
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[Hashable, _Entry] = {}

    def get(self, key: Hashable) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        age = self._clock() - entry.stored_at
        if age >= self._ttl:
            logger.debug("Cache expired for %r after %.1fs", key, age)
            del self._entries[key]
            return None
        return entry.value

    def put(self, key: Hashable, value: Any) -> None:
        self._entries[key] = _Entry(value=value, stored_at=self._clock())

    def get_or_load(self, key: Hashable, loader: Callable[[], Any]) -> Any:
        value = self.get(key)
        if value is None:
            logger.debug("Cache miss for %r", key)
            value = loader()
            self.put(key, value)
        return value

    def invalidate(self, key: Hashable | None = None) -> None:
        """Drop one key, or everything when *key* is None."""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)
