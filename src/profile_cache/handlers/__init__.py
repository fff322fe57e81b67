"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Cache / Gateway
    (HTTP)  -> (Business) -> (Data Access)
"""

from .lookup_handler import LookupHandler

__all__ = [
    "LookupHandler",
]
