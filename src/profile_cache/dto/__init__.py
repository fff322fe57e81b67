"""Data Transfer Objects for API contracts.

These Pydantic models define the external contracts: the responses this
service returns and the upstream payloads it consumes.

Internal domain logic should use entities from the entities package.
"""

from .responses import CacheStatsResponse, HealthCheckResponse, ProfileResponse, RepoItem
from .upstream import UpstreamRepoPayload, UpstreamUserPayload

__all__ = [
    "CacheStatsResponse",
    "HealthCheckResponse",
    "ProfileResponse",
    "RepoItem",
    "UpstreamRepoPayload",
    "UpstreamUserPayload",
]
