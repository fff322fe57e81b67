"""GitHub implementation of UpstreamGateway.

Fetches raw bytes through a Fetcher and decodes them with pydantic.
Decoding failures are reported as UnknownUpstreamError; HTTP status
failures come through from the fetcher as UpstreamError.
"""

from pydantic import ValidationError

from profile_cache.config import settings
from profile_cache.dto.upstream import UpstreamRepoListAdapter, UpstreamUserPayload
from profile_cache.entities import ProfileRaw, RepoRef
from profile_cache.exceptions import UnknownUpstreamError
from profile_cache.protocols import Fetcher


class GitHubGateway:
    """Gateway to the GitHub users API.

    This class satisfies the UpstreamGateway protocol through structural
    typing - no explicit inheritance needed.

    Endpoints (relative to ``base_url``, default ``https://api.github.com/users/``):
    - profile: ``<handle>``
    - repositories: ``<handle>/repos``
    """

    def __init__(
        self,
        fetcher: Fetcher,
        base_url: str | None = None,
        token: str | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            fetcher: Transport used for every request (required).
            base_url: Users API root ending with "/". Defaults to settings.
            token: Bearer token. Defaults to settings; empty means anonymous.
        """
        self._fetcher = fetcher
        self._base_url = base_url or settings.upstream_base_url
        self._token = settings.upstream_token if token is None else token

    @classmethod
    def create(
        cls,
        fetcher: Fetcher,
        base_url: str | None = None,
        token: str | None = None,
    ) -> "GitHubGateway":
        """Factory method to create GitHubGateway with defaults.

        Args:
            fetcher: Transport used for every request (required).
            base_url: Users API root. If None, uses settings.
            token: Bearer token. If None, uses settings.

        Returns:
            Configured GitHubGateway
        """
        return cls(fetcher=fetcher, base_url=base_url, token=token)

    def profile_url(self, handle: str) -> str:
        return f"{self._base_url}{handle}"

    def repos_url(self, handle: str) -> str:
        return f"{self._base_url}{handle}/repos"

    async def fetch_profile(self, handle: str) -> ProfileRaw:
        """Fetch and decode the user profile.

        Args:
            handle: The user handle

        Returns:
            The raw profile fields

        Raises:
            UpstreamError: On a non-success upstream response
            UnknownUpstreamError: On transport or decoding failure
        """
        body = await self._fetcher.fetch(self.profile_url(handle), self._token)
        try:
            payload = UpstreamUserPayload.model_validate_json(body)
        except ValidationError as e:
            raise UnknownUpstreamError(f"Malformed profile payload for {handle}") from e

        return ProfileRaw(
            name=payload.name,
            avatar_url=payload.avatar_url,
            location=payload.location,
            email=payload.email,
            url=payload.url,
            created_at=payload.created_at,
        )

    async def fetch_repos(self, handle: str) -> list[RepoRef]:
        """Fetch and decode the repository list.

        Args:
            handle: The user handle

        Returns:
            Repositories in the order the upstream returned them

        Raises:
            UpstreamError: On a non-success upstream response
            UnknownUpstreamError: On transport or decoding failure
        """
        body = await self._fetcher.fetch(self.repos_url(handle), self._token)
        try:
            payloads = UpstreamRepoListAdapter.validate_json(body)
        except ValidationError as e:
            raise UnknownUpstreamError(f"Malformed repository payload for {handle}") from e

        return [RepoRef(name=repo.name, url=repo.url) for repo in payloads]

    @property
    def has_token(self) -> bool:
        """Check if requests are authenticated."""
        return bool(self._token)
