"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - The cache is owned by the app, not a module global
"""

from contextlib import asynccontextmanager
from typing import Annotated

import httpx
import structlog
from fastapi import Depends, FastAPI, Request

from profile_cache.config import settings
from profile_cache.handlers import LookupHandler
from profile_cache.repositories import BoundedLRUCache, GitHubGateway, HttpxFetcher
from profile_cache.services import LookupService
from profile_cache.utils.logging import configure_logging

logger = structlog.get_logger()


def get_handler(request: Request) -> LookupHandler:
    """Dependency injection for LookupHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The LookupHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "lookup_handler", None)
    if handler is None:
        raise RuntimeError("LookupHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. HTTP client + fetcher + gateway (upstream access)
    2. Cache (bounded LRU, sized from settings)
    3. Service (business logic), owned by the handler
    4. Handler (HTTP endpoints) - stored in app.state.lookup_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes the HTTP client and removes the handler from app.state,
        even when the app exits with an error
    """
    configure_logging()

    client = httpx.AsyncClient(
        timeout=settings.upstream_timeout,
        limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
    )
    fetcher = HttpxFetcher(client=client)
    gateway = GitHubGateway.create(fetcher=fetcher)
    cache = BoundedLRUCache.create(capacity=settings.cache_capacity)

    lookup_service = LookupService.create(cache=cache, gateway=gateway)
    lookup_handler = LookupHandler(lookup_service=lookup_service, token_configured=gateway.has_token)

    app.state.http_client = client
    app.state.lookup_handler = lookup_handler

    logger.info(
        "Lookup service initialized",
        token_configured=gateway.has_token,
        cache_capacity=cache.capacity,
        upstream=settings.upstream_base_url,
    )

    try:
        yield
    finally:
        await client.aclose()

        del app.state.lookup_handler
        del app.state.http_client
        logger.info("Lookup service shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[LookupHandler, Depends(get_handler)]
