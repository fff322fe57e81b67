"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the transport (httpx today) without touching the gateway
- Unit testing the lookup service with fake gateways
- Clear separation of concerns

Usage:
    ```python
    from profile_cache.protocols import CacheStore, UpstreamGateway

    gateway: UpstreamGateway = GitHubGateway(fetcher=HttpxFetcher(client))
    cache: CacheStore = BoundedLRUCache(capacity=1000)
    ```
"""

from .cache_store import CacheStore
from .fetcher import Fetcher
from .upstream_gateway import UpstreamGateway

__all__ = [
    "CacheStore",
    "Fetcher",
    "UpstreamGateway",
]
