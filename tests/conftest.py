"""
Shared fixtures and fakes for profile cache tests.
"""

import asyncio

import pytest

from profile_cache.entities import Profile, ProfileRaw, RepoRef
from profile_cache.repositories import BoundedLRUCache
from profile_cache.services import LookupService


class FakeGateway:
    """In-memory UpstreamGateway recording every call.

    Set ``profile_error`` / ``repos_error`` to make a fetch raise, and
    ``profile_gate`` / ``repos_gate`` to an ``asyncio.Event`` to hold a
    fetch until the event is set.
    """

    def __init__(
        self,
        profile: ProfileRaw | None = None,
        repos: list[RepoRef] | None = None,
    ) -> None:
        self.profile = profile or ProfileRaw()
        self.repos = repos or []
        self.profile_error: Exception | None = None
        self.repos_error: Exception | None = None
        self.profile_gate: asyncio.Event | None = None
        self.repos_gate: asyncio.Event | None = None
        self.profile_calls: list[str] = []
        self.repos_calls: list[str] = []
        self.cancelled: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.profile_calls) + len(self.repos_calls)

    async def _hold(self, gate: asyncio.Event | None, name: str) -> None:
        if gate is None:
            return
        try:
            await gate.wait()
        except asyncio.CancelledError:
            self.cancelled.append(name)
            raise

    async def fetch_profile(self, handle: str) -> ProfileRaw:
        self.profile_calls.append(handle)
        await self._hold(self.profile_gate, "profile")
        if self.profile_error is not None:
            raise self.profile_error
        return self.profile

    async def fetch_repos(self, handle: str) -> list[RepoRef]:
        self.repos_calls.append(handle)
        await self._hold(self.repos_gate, "repos")
        if self.repos_error is not None:
            raise self.repos_error
        return list(self.repos)


@pytest.fixture
def octocat_raw() -> ProfileRaw:
    return ProfileRaw(
        name="The Octocat",
        avatar_url="avatar",
        location="loc",
        email="email",
        url="url",
        created_at="created",
    )


@pytest.fixture
def octocat_profile() -> Profile:
    return Profile(
        handle="octocat",
        display_name="The Octocat",
        avatar_url="",
        location="",
        email="",
        profile_url="",
        created_at="",
        repos=(),
    )


@pytest.fixture
def gateway(octocat_raw) -> FakeGateway:
    return FakeGateway(profile=octocat_raw)


@pytest.fixture
def cache() -> BoundedLRUCache:
    return BoundedLRUCache(capacity=10)


@pytest.fixture
def service(cache, gateway) -> LookupService:
    return LookupService(cache=cache, gateway=gateway)


@pytest.fixture
def make_gateway():
    """Factory for FakeGateway instances with custom upstream data."""
    return FakeGateway
