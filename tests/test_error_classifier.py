"""
Tests for lookup failure classification.
"""

import pytest

from profile_cache.entities import FailureKind, LookupFailure
from profile_cache.exceptions import UnknownUpstreamError, UpstreamError
from profile_cache.services import bad_request, classify


def test_upstream_error_keeps_status_text():
    failure = classify(UpstreamError(404, "Not Found"))
    assert failure == LookupFailure(kind=FailureKind.UPSTREAM_FAILURE, message="Not Found")


@pytest.mark.parametrize(
    "error",
    [UnknownUpstreamError("decode"), ValueError("x"), KeyError("y"), TimeoutError()],
)
def test_everything_else_is_unknown(error):
    assert classify(error) == LookupFailure(kind=FailureKind.UNKNOWN_FAILURE)


def test_bad_request_carries_reason():
    failure = bad_request("too long")
    assert failure.kind is FailureKind.BAD_REQUEST
    assert failure.message == "too long"


def test_upstream_error_str():
    assert str(UpstreamError(503, "Service Unavailable")) == "503 Service Unavailable"
