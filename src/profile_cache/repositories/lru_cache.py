"""In-memory bounded LRU implementation of CacheStore.

Entries live in an ``OrderedDict`` ordered from least to most recently
used; one lock guards the ordering and the key index together so every
operation is atomic and O(1).
"""

import threading
from collections import OrderedDict
from typing import Any, Generic, TypeVar

from profile_cache.config import settings
from profile_cache.exceptions import CacheMissError

K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


class BoundedLRUCache(Generic[K, V]):
    """Fixed-capacity, thread-safe least-recently-used cache.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Recency rules:
    - ``put`` makes the written entry the freshest (insert or overwrite)
    - ``get`` / ``get_if_present`` promote a found entry to freshest
    - ``contains`` is a pure probe and leaves the order untouched

    Example:
        ```python
        cache = BoundedLRUCache[str, Profile](capacity=2)
        cache.put("a", profile_a)
        cache.put("b", profile_b)
        cache.get("a")
        cache.put("c", profile_c)  # evicts "b"
        ```
    """

    def __init__(self, capacity: int | None = None) -> None:
        """Initialize the cache.

        Args:
            capacity: Maximum number of entries (>= 1). Defaults to settings.

        Raises:
            ValueError: If capacity is less than 1
        """
        capacity = settings.cache_capacity if capacity is None else capacity
        if capacity < 1:
            raise ValueError(f"Cache capacity must be at least 1, got {capacity}")

        self._capacity = capacity
        self._entries: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()

        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @classmethod
    def create(cls, capacity: int | None = None) -> "BoundedLRUCache[K, V]":
        """Factory method to create BoundedLRUCache with defaults.

        Args:
            capacity: Maximum number of entries. If None, uses settings.

        Returns:
            Configured BoundedLRUCache
        """
        return cls(capacity=capacity)

    @property
    def capacity(self) -> int:
        """Get the maximum number of entries."""
        return self._capacity

    def contains(self, key: K) -> bool:
        """Check if a key is present. Does not update recency.

        Args:
            key: The key to probe

        Returns:
            True if present, False otherwise
        """
        with self._lock:
            return key in self._entries

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, key: K) -> V:
        """Return the value for a key and mark it most recently used.

        Args:
            key: The key to look up

        Returns:
            The stored value

        Raises:
            CacheMissError: If the key is absent
        """
        value = self.get_if_present(key, _MISSING)
        if value is _MISSING:
            raise CacheMissError(key)
        return value

    def get_if_present(self, key: K, default: Any = None) -> V | Any:
        """Atomically look up a key, promoting it if found.

        Args:
            key: The key to look up
            default: Value returned on a miss

        Returns:
            The stored value, or ``default`` on a miss
        """
        with self._lock:
            try:
                value = self._entries[key]
            except KeyError:
                self._misses += 1
                return default
            self._entries.move_to_end(key)
            self._hits += 1
            return value

    def put(self, key: K, value: V) -> None:
        """Insert or overwrite an entry and mark it most recently used.

        If a new key pushes the size over capacity, the least recently
        used entry is evicted.

        Args:
            key: The key to write
            value: The value to store
        """
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                self._entries[key] = value
                return

            self._entries[key] = value
            if len(self._entries) > self._capacity:
                self._entries.popitem(last=False)
                self._evictions += 1

    def keys(self) -> list[K]:
        """Snapshot of keys, least recently used first."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with size, capacity, hits, misses and evictions
        """
        with self._lock:
            return {
                "total_entries": len(self._entries),
                "capacity": self._capacity,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
            }
