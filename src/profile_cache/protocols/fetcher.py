"""Transport protocol.

The single capability the gateway needs from an HTTP client: fetch the
raw body at a URL, optionally authenticated with a bearer token. JSON
decoding is left to the caller.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Fetcher(Protocol):
    """Protocol for raw HTTP GET transports."""

    async def fetch(self, url: str, token: str | None = None) -> bytes:
        """Fetch the body at ``url``.

        Args:
            url: Absolute URL to GET
            token: Bearer token; no Authorization header is sent if empty

        Returns:
            The raw response body

        Raises:
            UpstreamError: If the response status is not a success
            UnknownUpstreamError: If the request failed without a status
        """
        ...
