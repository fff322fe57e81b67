"""Exception types raised by the transport, gateway and cache layers.

The lookup service never lets these escape: it converts them into
``LookupFailure`` values (see ``services.error_classifier``).
"""


class ProfileCacheError(Exception):
    """Base class for all profile cache errors."""


class UpstreamError(ProfileCacheError):
    """The upstream API answered with a non-success HTTP status.

    Attributes:
        status: HTTP status code returned by the upstream
        message: Status text reported by the upstream (e.g. "Not Found")
    """

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"{status} {message}".strip())
        self.status = status
        self.message = message


class UnknownUpstreamError(ProfileCacheError):
    """Upstream call failed without an HTTP status (network, decoding, ...)."""


class CacheMissError(KeyError):
    """Raised by ``BoundedLRUCache.get`` when the key is absent."""
