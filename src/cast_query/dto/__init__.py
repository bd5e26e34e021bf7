"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal domain logic should use entities from the entities package.
"""

from .requests import CastQueryRequest, ParameterError
from .responses import (
    CastQueryResponse,
    ErrorResponse,
    HealthCheckResponse,
    MessageResponse,
)

__all__ = [
    "CastQueryRequest",
    "ParameterError",
    "CastQueryResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "MessageResponse",
]
