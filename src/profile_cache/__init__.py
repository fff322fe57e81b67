"""Profile Cache - cached user profile and repository lookups.

This package provides a layered architecture for cache-aside lookups:

Layers:
    - protocols: Interface contracts (CacheStore, Fetcher, UpstreamGateway)
    - repositories: Implementations (BoundedLRUCache, HttpxFetcher, GitHubGateway)
    - services: Business logic (LookupService, failure classification)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API and upstream contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from profile_cache.repositories import BoundedLRUCache, GitHubGateway, HttpxFetcher
    from profile_cache.services import LookupService

    service = LookupService.create(
        cache=BoundedLRUCache.create(capacity=1000),
        gateway=GitHubGateway.create(fetcher=HttpxFetcher.create()),
    )
    result = await service.lookup("octocat")
    ```

For HTTP API:
    ```python
    from profile_cache.api.app import app
    ```
"""

from profile_cache.config import settings
from profile_cache.dto import ProfileResponse
from profile_cache.entities import FailureKind, LookupFailure, Profile, ProfileRaw, RepoRef
from profile_cache.exceptions import (
    CacheMissError,
    ProfileCacheError,
    UnknownUpstreamError,
    UpstreamError,
)
from profile_cache.handlers import LookupHandler
from profile_cache.protocols import CacheStore, Fetcher, UpstreamGateway
from profile_cache.repositories import BoundedLRUCache, GitHubGateway, HttpxFetcher
from profile_cache.services import LookupService

__all__ = [
    # Configuration
    "settings",
    # Protocols (interfaces)
    "CacheStore",
    "Fetcher",
    "UpstreamGateway",
    # Services (business logic)
    "LookupService",
    # Handlers (HTTP)
    "LookupHandler",
    # Repositories (implementations)
    "BoundedLRUCache",
    "GitHubGateway",
    "HttpxFetcher",
    # Entities (domain models)
    "FailureKind",
    "LookupFailure",
    "Profile",
    "ProfileRaw",
    "RepoRef",
    # DTOs (API contracts)
    "ProfileResponse",
    # Errors
    "ProfileCacheError",
    "UpstreamError",
    "UnknownUpstreamError",
    "CacheMissError",
]
