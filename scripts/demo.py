#!/usr/bin/env python3
"""
Demo script for profile cache.

This script looks up a few users against the live upstream API twice, showing
the difference between a cold (upstream) and a warm (cached) lookup, then
prints the cache statistics.
"""

import asyncio
import time

from profile_cache import BoundedLRUCache, GitHubGateway, HttpxFetcher, LookupFailure, LookupService
from profile_cache.config import settings


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def timed_lookup(service: LookupService, handle: str) -> None:
    start = time.perf_counter()
    result = await service.lookup(handle)
    elapsed_ms = (time.perf_counter() - start) * 1000

    if isinstance(result, LookupFailure):
        print(f"  ✗ {handle:<20} {result.kind.value} {result.message!r} ({elapsed_ms:.1f}ms)")
    else:
        print(f"  ✓ {handle:<20} {result.display_name!r}, {len(result.repos)} repos ({elapsed_ms:.1f}ms)")


async def main() -> None:
    fetcher = HttpxFetcher.create()
    service = LookupService.create(
        cache=BoundedLRUCache.create(capacity=2),
        gateway=GitHubGateway.create(fetcher=fetcher),
    )
    handles = ["octocat", "torvalds", "invalid@name!", "this-user-should-not-exist-0000"]

    print_section("Cold lookups (upstream)")
    print(f"Upstream: {settings.upstream_base_url} (token configured: {settings.has_token})")
    for handle in handles:
        await timed_lookup(service, handle)

    print_section("Warm lookups (cache)")
    for handle in handles:
        await timed_lookup(service, handle)

    print_section("Eviction (capacity 2)")
    await timed_lookup(service, "gvanrossum")
    await timed_lookup(service, "octocat")

    print_section("Cache stats")
    for key, value in service.get_stats().items():
        print(f"  {key:<15} {value}")

    await fetcher.close()


if __name__ == "__main__":
    asyncio.run(main())
