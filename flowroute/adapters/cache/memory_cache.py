"""Thread-safe in-memory cache for derived weighted graphs.

One weighted graph is derived per time period; this cache keeps them
so repeated queries for the same period reuse the same instance.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """Thread-safe in-memory cache with optional size bound.

    Implements the CachePort protocol.

    Attributes:
        max_size: Maximum number of entries, oldest evicted first (None = unlimited)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[Graph](name="weighted-graphs", max_size=4)
        weighted = cache.get_or_compute("morning", lambda: init_edge_weights(g, "morning"))
    """

    max_size: Optional[int] = None
    name: str = "cache"

    _store: Dict[str, Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None if not cached."""
        with self._lock:
            if key not in self._store:
                self._misses += 1
                return None
            self._hits += 1
            return self._store[key]

    def set(self, key: str, value: T) -> None:
        """Store a value, evicting the oldest entry when full."""
        with self._lock:
            if (
                self.max_size is not None
                and key not in self._store
                and len(self._store) >= self.max_size
            ):
                oldest_key = next(iter(self._store))
                del self._store[oldest_key]
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": oldest_key, "reason": "max_size"},
                )
            self._store[key] = value
            self._logger.debug("Cache entry set", extra={"key": key})

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        with self._lock:
            value = self.get(key)
            if value is not None:
                self._logger.debug("Cache hit", extra={"key": key})
                return value

            self._logger.debug("Cache miss, computing", extra={"key": key})
            computed = compute_fn()
            self.set(key, computed)
            return computed

    def clear(self) -> int:
        """Clear all entries, returning how many were removed."""
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def invalidate(self, key: str) -> bool:
        """Drop one entry, returning True if it existed."""
        with self._lock:
            if key not in self._store:
                return False
            del self._store[key]
            self._logger.debug("Cache entry invalidated", extra={"key": key})
            return True

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counts, hit rate and size."""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._store.keys())
