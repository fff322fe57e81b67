"""Payload DTOs for the upstream users API.

Only the consumed fields are declared; everything else in the payload
is ignored. No field is required or defaulted beyond ``None``.
"""

from pydantic import BaseModel, ConfigDict, TypeAdapter


class UpstreamUserPayload(BaseModel):
    """Body of ``GET <base>/<handle>``."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    avatar_url: str | None = None
    location: str | None = None
    email: str | None = None
    url: str | None = None
    created_at: str | None = None


class UpstreamRepoPayload(BaseModel):
    """Single element of ``GET <base>/<handle>/repos``."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    url: str | None = None


UpstreamRepoListAdapter = TypeAdapter(list[UpstreamRepoPayload])
