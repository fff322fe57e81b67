"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Cache / Gateway
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from profile_cache.services import LookupService

    service = LookupService.create(cache=cache, gateway=gateway)
    result = await service.lookup("octocat")
    ```
"""

from .error_classifier import bad_request, classify
from .lookup_service import LookupService

__all__ = [
    "LookupService",
    "bad_request",
    "classify",
]
