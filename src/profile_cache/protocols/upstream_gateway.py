"""Upstream gateway protocol.

Defines the two independent fetches the lookup service performs for a
handle: the user profile and the user's repository list.

Implementations can include:
- GitHubGateway (default, GitHub REST users API)
- In-memory fakes for tests
"""

from typing import Protocol, runtime_checkable

from profile_cache.entities import ProfileRaw, RepoRef


@runtime_checkable
class UpstreamGateway(Protocol):
    """Protocol for profile and repository-list sources."""

    async def fetch_profile(self, handle: str) -> ProfileRaw:
        """Fetch the raw user profile for a handle.

        Args:
            handle: The user handle

        Returns:
            The upstream profile fields, unvalidated

        Raises:
            UpstreamError: On a non-success upstream response
            UnknownUpstreamError: On any other failure
        """
        ...

    async def fetch_repos(self, handle: str) -> list[RepoRef]:
        """Fetch the repository list for a handle.

        Args:
            handle: The user handle

        Returns:
            Repositories in upstream order

        Raises:
            UpstreamError: On a non-success upstream response
            UnknownUpstreamError: On any other failure
        """
        ...
