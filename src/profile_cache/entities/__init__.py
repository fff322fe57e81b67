"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.

Entities should have:
- No JSON serialization logic
- No Pydantic validation
- No external dependencies
"""

from .lookup_failure import FailureKind, LookupFailure
from .profile import Profile, ProfileRaw, RepoRef

__all__ = [
    "FailureKind",
    "LookupFailure",
    "Profile",
    "ProfileRaw",
    "RepoRef",
]
