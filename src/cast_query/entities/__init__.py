"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .cast_query_result import CastQueryResult
from .movie import UNKNOWN_MOVIE, unknown_movie
from .query_plan import QueryPlan, QueryShape

__all__ = [
    "CastQueryResult",
    "QueryPlan",
    "QueryShape",
    "UNKNOWN_MOVIE",
    "unknown_movie",
]
