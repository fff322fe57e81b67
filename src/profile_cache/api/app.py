from typing import Any

from fastapi import FastAPI

from profile_cache.api.dependencies import HandlerDep, lifespan
from profile_cache.config import settings
from profile_cache.dto import CacheStatsResponse, HealthCheckResponse, ProfileResponse

app = FastAPI(
    title="Profile Cache API",
    description="User profile and repository lookup with an in-memory LRU cache",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Profile Cache API",
        "version": "0.1.0",
        "description": "User profile and repository lookup with an in-memory LRU cache",
        "endpoints": {
            "users": "/users/{username}",
            "stats": "/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/users/{username}", response_model=ProfileResponse)
async def get_user(username: str, handler: HandlerDep) -> ProfileResponse:
    """
    Look up a user's profile and repositories.

    The username must contain only letters, digits and dashes and must not
    exceed 39 characters. Results are cached in memory; repeated lookups for
    the same username do not contact the upstream API.

    Args:
        username: The handle to look up.

    Returns:
        The merged profile with its repository list.
    """
    return await handler.get_user(username)


@app.get("/stats", response_model=CacheStatsResponse)
async def get_stats(handler: HandlerDep) -> CacheStatsResponse:
    """Get cache statistics."""
    return await handler.get_stats()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "profile_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
