"""Lookup failure domain entity."""

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    """The outward-visible failure kinds of a lookup."""

    BAD_REQUEST = "bad_request"
    UPSTREAM_FAILURE = "upstream_failure"
    UNKNOWN_FAILURE = "unknown_failure"


@dataclass(frozen=True)
class LookupFailure:
    """A failed lookup, returned by ``LookupService.lookup`` instead of a Profile.

    Attributes:
        kind: Which of the three failure kinds this is
        message: Validation reason or upstream status text; empty for unknown failures
    """

    kind: FailureKind
    message: str = ""
