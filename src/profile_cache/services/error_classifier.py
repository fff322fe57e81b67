"""Mapping of lookup failures onto the outward failure taxonomy."""

from profile_cache.entities import FailureKind, LookupFailure
from profile_cache.exceptions import UpstreamError


def bad_request(reason: str) -> LookupFailure:
    """Build the failure returned for an invalid handle."""
    return LookupFailure(kind=FailureKind.BAD_REQUEST, message=reason)


def classify(error: BaseException) -> LookupFailure:
    """Map an exception raised while fetching upstream data.

    ``UpstreamError`` keeps its status text; anything else becomes an
    unknown failure with no message.

    Args:
        error: The exception that aborted the lookup

    Returns:
        The corresponding LookupFailure
    """
    if isinstance(error, UpstreamError):
        return LookupFailure(kind=FailureKind.UPSTREAM_FAILURE, message=error.message)
    return LookupFailure(kind=FailureKind.UNKNOWN_FAILURE)
