"""Handler layer for request/response handling.

Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .cast_handler import JSON_HEADERS, CastHandler, HandlerResponse

__all__ = [
    "CastHandler",
    "HandlerResponse",
    "JSON_HEADERS",
]
