"""Profile domain entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepoRef:
    """A repository descriptor nested in a profile.

    Attributes:
        name: Repository name
        url: Repository API address
    """

    name: str | None
    url: str | None


@dataclass(frozen=True)
class ProfileRaw:
    """User record as returned by the upstream profile API.

    Values are passed through untouched; any of them may be None when
    the upstream omits the field.
    """

    name: str | None = None
    avatar_url: str | None = None
    location: str | None = None
    email: str | None = None
    url: str | None = None
    created_at: str | None = None


@dataclass(frozen=True)
class Profile:
    """Merged user profile plus repository list.

    Built only by ``LookupService`` once both upstream fetches succeeded,
    and stored whole in the cache.

    Attributes:
        handle: The looked-up user handle (cache key)
        display_name: Upstream ``name``
        avatar_url: Upstream ``avatar_url``
        location: Upstream ``location``
        email: Upstream ``email``
        profile_url: Upstream ``url``
        created_at: Upstream ``created_at``
        repos: Repositories in upstream order
    """

    handle: str
    display_name: str | None
    avatar_url: str | None
    location: str | None
    email: str | None
    profile_url: str | None
    created_at: str | None
    repos: tuple[RepoRef, ...] = ()
