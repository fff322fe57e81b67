"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from profile_cache.entities import Profile


class RepoItem(BaseModel):
    """Single repository item (in repos array)."""

    name: str | None = Field(..., description="Repository name")
    url: str | None = Field(..., description="Repository API address")


class ProfileResponse(BaseModel):
    """Response DTO for a user lookup.

    Field names follow the legacy API format.
    """

    user_name: str = Field(..., description="The requested handle")
    display_name: str | None = Field(..., description="User's display name")
    avatar: str | None = Field(..., description="Avatar image URL")
    geo_location: str | None = Field(..., description="Free-form location")
    email: str | None = Field(..., description="Public email address")
    url: str | None = Field(..., description="Upstream profile API address")
    created_at: str | None = Field(..., description="Account creation timestamp")
    repos: list[RepoItem] = Field(
        default_factory=list,
        description="User repositories, in upstream order",
    )

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            user_name=profile.handle,
            display_name=profile.display_name,
            avatar=profile.avatar_url,
            geo_location=profile.location,
            email=profile.email,
            url=profile.profile_url,
            created_at=profile.created_at,
            repos=[RepoItem(name=repo.name, url=repo.url) for repo in profile.repos],
        )


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    total_entries: int = Field(..., description="Number of cached profiles", ge=0)
    capacity: int = Field(..., description="Maximum number of cached profiles", ge=1)
    hits: int = Field(..., description="Lookups served from cache", ge=0)
    misses: int = Field(..., description="Lookups that went upstream", ge=0)
    evictions: int = Field(..., description="Entries dropped to stay within capacity", ge=0)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_entries: int = Field(..., description="Number of cached profiles", ge=0)
    cache_capacity: int = Field(..., description="Maximum number of cached profiles", ge=1)
    token_configured: bool = Field(..., description="Whether upstream calls are authenticated")
