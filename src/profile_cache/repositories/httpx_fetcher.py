"""httpx-based implementation of the Fetcher protocol.

Performs a single GET per call, with no retries. Timeouts are whatever
the underlying ``httpx.AsyncClient`` enforces.
"""

import httpx

from profile_cache.config import settings
from profile_cache.exceptions import UnknownUpstreamError, UpstreamError


class HttpxFetcher:
    """Async HTTP transport backed by ``httpx.AsyncClient``.

    This class satisfies the Fetcher protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        fetcher = HttpxFetcher.create()
        body = await fetcher.fetch("https://api.github.com/users/octocat", token="")
        await fetcher.close()
        ```
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            client: Shared async client. If None, one is created lazily and
                owned by this fetcher.
            timeout: Request timeout in seconds for the owned client.
                Defaults to settings.upstream_timeout.
        """
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout or settings.upstream_timeout

    @classmethod
    def create(cls, timeout: float | None = None) -> "HttpxFetcher":
        """Factory method to create HttpxFetcher owning its own client.

        Args:
            timeout: Request timeout in seconds. If None, uses settings.

        Returns:
            Configured HttpxFetcher
        """
        return cls(timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    async def fetch(self, url: str, token: str | None = None) -> bytes:
        """GET ``url`` and return the raw body.

        Args:
            url: Absolute URL to fetch
            token: Bearer token; the Authorization header is only sent if non-empty

        Returns:
            The response body

        Raises:
            UpstreamError: If the response status is not 2xx
            UnknownUpstreamError: If the request failed without a response
        """
        headers = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = await self.client.get(url, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                status=e.response.status_code,
                message=e.response.reason_phrase,
            ) from e
        except httpx.HTTPError as e:
            raise UnknownUpstreamError(f"Request to {url} failed: {e}") from e

        return response.content

    async def close(self) -> None:
        """Close the async HTTP client if this fetcher owns it.

        Should be called when shutting down the application.
        """
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
