"""HTTP handlers for profile lookups.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error responses.
"""

from fastapi import HTTPException, status

from profile_cache.dto import CacheStatsResponse, HealthCheckResponse, ProfileResponse
from profile_cache.entities import FailureKind, LookupFailure
from profile_cache.services import LookupService


class LookupHandler:
    """HTTP handlers for lookup operations.

    This handler delegates business logic to LookupService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Mapping failure kinds to status codes (400 / 500)

    Example:
        ```python
        handler = LookupHandler(lookup_service=service, token_configured=False)

        @app.get("/users/{username}", response_model=ProfileResponse)
        async def get_user(username: str):
            return await handler.get_user(username)
        ```
    """

    def __init__(self, lookup_service: LookupService, token_configured: bool = False) -> None:
        """Initialize the lookup handler.

        Args:
            lookup_service: The lookup service for business logic (required).
            token_configured: Whether upstream calls carry a bearer token.
        """
        self._service = lookup_service
        self._token_configured = token_configured

    async def get_user(self, username: str) -> ProfileResponse:
        """Handle GET /users/{username} requests.

        Args:
            username: The handle from the path

        Returns:
            ProfileResponse with the merged profile

        Raises:
            HTTPException: 400 for an invalid handle, 500 for upstream or unknown failures
        """
        result = await self._service.lookup(username)
        if isinstance(result, LookupFailure):
            raise self._to_http_error(result)
        return ProfileResponse.from_entity(result)

    @staticmethod
    def _to_http_error(failure: LookupFailure) -> HTTPException:
        if failure.kind is FailureKind.BAD_REQUEST:
            return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=failure.message)
        if failure.kind is FailureKind.UPSTREAM_FAILURE:
            return HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get response from github - {failure.message}",
            )
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="unknown error")

    async def get_stats(self) -> CacheStatsResponse:
        """Handle GET /stats requests."""
        stats = self._service.get_stats()
        return CacheStatsResponse(
            total_entries=stats.get("total_entries", 0),
            capacity=stats.get("capacity", 1),
            hits=stats.get("hits", 0),
            misses=stats.get("misses", 0),
            evictions=stats.get("evictions", 0),
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        stats = self._service.get_stats()
        return HealthCheckResponse(
            status="healthy",
            cache_entries=stats.get("total_entries", 0),
            cache_capacity=stats.get("capacity", 1),
            token_configured=self._token_configured,
        )
