"""Cache storage protocol.

Defines the interface for the in-process store that holds merged
profiles keyed by handle.

Implementations can include:
- BoundedLRUCache (default, fixed capacity, least-recently-used eviction)
- Any other mapping with the same recency semantics
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

K = TypeVar("K")
V = TypeVar("V")


@runtime_checkable
class CacheStore(Protocol[K, V]):
    """Protocol for bounded key/value caches.

    Example:
        ```python
        from profile_cache.protocols import CacheStore

        cache: CacheStore[str, Profile] = BoundedLRUCache(capacity=1000)
        ```
    """

    @property
    def capacity(self) -> int:
        """Return the maximum number of entries."""
        ...

    def contains(self, key: K) -> bool:
        """Check if a key is present without touching its recency.

        Args:
            key: The key to probe

        Returns:
            True if present, False otherwise
        """
        ...

    def get(self, key: K) -> V:
        """Return the value for a key and mark it most recently used.

        Args:
            key: The key to look up

        Returns:
            The stored value

        Raises:
            CacheMissError: If the key is absent
        """
        ...

    def get_if_present(self, key: K, default: Any = None) -> V | Any:
        """Atomically look up a key, marking it most recently used if found.

        Args:
            key: The key to look up
            default: Value returned on a miss

        Returns:
            The stored value, or ``default``
        """
        ...

    def put(self, key: K, value: V) -> None:
        """Insert or overwrite an entry, evicting the LRU entry on overflow.

        Args:
            key: The key to write
            value: The value to store
        """
        ...

    def __len__(self) -> int:
        """Return the number of entries."""
        ...

    def stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
