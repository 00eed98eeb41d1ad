"""Cache port - Injectable caching abstraction.

Weighted graphs are derived once per time period and reused; the
caller decides how through this protocol.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing, caching disabled
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None if not cached."""
        ...

    def set(self, key: str, value: T) -> None:
        """Store a value under ``key``."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def clear(self) -> int:
        """Clear all entries, returning how many were removed."""
        ...

    def invalidate(self, key: str) -> bool:
        """Drop one entry, returning True if it existed."""
        ...

    def size(self) -> int:
        """Return the number of cached entries."""
        ...
