"""Repository layer for data access.

This layer holds the concrete implementations behind the protocols:
- BoundedLRUCache: in-process LRU store (CacheStore)
- HttpxFetcher: HTTP transport (Fetcher)
- GitHubGateway: profile and repository-list source (UpstreamGateway)

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from .github_gateway import GitHubGateway
from .httpx_fetcher import HttpxFetcher
from .lru_cache import BoundedLRUCache

__all__ = [
    "BoundedLRUCache",
    "GitHubGateway",
    "HttpxFetcher",
]
