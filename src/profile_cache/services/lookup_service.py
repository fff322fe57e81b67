"""Lookup service for core business logic.

This service orchestrates cache-aside lookups by coordinating
the cache (merged profiles) and the upstream gateway (raw data).
"""

import asyncio

import structlog

from profile_cache.entities import FailureKind, LookupFailure, Profile, ProfileRaw, RepoRef
from profile_cache.protocols import CacheStore, UpstreamGateway
from profile_cache.services.error_classifier import bad_request, classify
from profile_cache.utils.validation import INVALID_HANDLE_MESSAGE, is_valid_handle

logger = structlog.get_logger()


class LookupService:
    """Cache-aside profile lookup.

    This service depends on PROTOCOLS, not concrete implementations:
    - CacheStore: the bounded in-process cache
    - UpstreamGateway: GitHub today, anything with the same two fetches tomorrow

    Flow for ``lookup(handle)``:
    1. Reject invalid handles (no cache or upstream access)
    2. Return the cached profile on a hit
    3. On a miss, fetch profile and repositories concurrently
    4. Merge them and store the result; a failure stores nothing

    Example:
        ```python
        from profile_cache.repositories import BoundedLRUCache, GitHubGateway, HttpxFetcher
        from profile_cache.services import LookupService

        service = LookupService.create(
            cache=BoundedLRUCache.create(),
            gateway=GitHubGateway.create(fetcher=HttpxFetcher.create()),
        )
        result = await service.lookup("octocat")
        ```
    """

    def __init__(self, cache: CacheStore, gateway: UpstreamGateway) -> None:
        """Initialize the lookup service.

        Args:
            cache: Store for merged profiles keyed by handle (required).
            gateway: Source of raw profile and repository data (required).
        """
        self._cache = cache
        self._gateway = gateway

    @classmethod
    def create(cls, cache: CacheStore, gateway: UpstreamGateway) -> "LookupService":
        """Factory method to create LookupService.

        Args:
            cache: Store for merged profiles (required).
            gateway: Upstream data source (required).

        Returns:
            Configured LookupService instance
        """
        return cls(cache=cache, gateway=gateway)

    async def lookup(self, handle: str) -> Profile | LookupFailure:
        """Return the profile for a handle, from cache or upstream.

        Args:
            handle: The user handle

        Returns:
            The Profile on success, otherwise a LookupFailure describing
            why (bad request, upstream failure or unknown failure)
        """
        if not is_valid_handle(handle):
            logger.debug("Invalid handle received")
            return bad_request(INVALID_HANDLE_MESSAGE)

        logger.info("Handle received", handle=handle)

        cached = self._cache.get_if_present(handle)
        if cached is not None:
            logger.info("Found handle in cache; skipping upstream", handle=handle)
            return cached

        try:
            raw, repos = await self._fetch_both(handle)
        except Exception as e:
            failure = classify(e)
            if failure.kind is FailureKind.UPSTREAM_FAILURE:
                logger.error("Failed to get response from upstream", handle=handle, status=failure.message)
            else:
                logger.error("Unknown error during lookup", handle=handle, error=str(e))
            return failure

        profile = self._merge(handle, raw, repos)
        self._cache.put(handle, profile)
        logger.info("Cached profile", handle=handle, repos=len(profile.repos))
        return profile

    async def _fetch_both(self, handle: str) -> tuple[ProfileRaw, list[RepoRef]]:
        """Run both upstream fetches concurrently.

        Results are consumed in completion order, so the earliest failure
        is the one raised; the other fetch is then cancelled.
        """
        profile_task = asyncio.create_task(self._gateway.fetch_profile(handle))
        repos_task = asyncio.create_task(self._gateway.fetch_repos(handle))
        tasks = (profile_task, repos_task)

        try:
            for next_done in asyncio.as_completed(tasks):
                await next_done
            return profile_task.result(), repos_task.result()
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()

    @staticmethod
    def _merge(handle: str, raw: ProfileRaw, repos: list[RepoRef]) -> Profile:
        return Profile(
            handle=handle,
            display_name=raw.name,
            avatar_url=raw.avatar_url,
            location=raw.location,
            email=raw.email,
            profile_url=raw.url,
            created_at=raw.created_at,
            repos=tuple(repos),
        )

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        return self._cache.stats()

    @property
    def cache(self) -> CacheStore:
        """Get the underlying cache (for testing)."""
        return self._cache

    @property
    def gateway(self) -> UpstreamGateway:
        """Get the underlying gateway (for testing)."""
        return self._gateway
