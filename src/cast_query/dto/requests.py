"""Request DTOs for the cast query endpoint."""

import re
from collections.abc import Mapping

from pydantic import BaseModel, Field

from cast_query.entities import QueryPlan

MISSING_MOVIE_ID = "Missing movieId parameter"
INVALID_MOVIE_ID = "Invalid movieId parameter"

# Leading base-10 integer; anything after the digits is ignored
_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


class ParameterError(ValueError):
    """Raised when the query string cannot be turned into a request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CastQueryRequest(BaseModel):
    """Request DTO built from the raw query-string parameters.

    The handler converts this into a QueryPlan for the service layer.
    """

    movie_id: int = Field(..., description="Movie to list cast members for")
    role_name: str | None = Field(None, description="roleName prefix filter (wins over actor_name)")
    actor_name: str | None = Field(None, description="actorName prefix filter")
    include_movie: bool = Field(False, description="Attach movie metadata to the response")

    @classmethod
    def from_params(cls, params: Mapping[str, str] | None) -> "CastQueryRequest":
        """Parse raw query-string parameters.

        Args:
            params: movieId, roleName, actorName and movie, as sent

        Returns:
            The validated request

        Raises:
            ParameterError: If movieId is missing or does not start with a base-10 integer
        """
        params = params or {}

        raw_movie_id = params.get("movieId")
        if not raw_movie_id:
            raise ParameterError(MISSING_MOVIE_ID)
        match = _LEADING_INTEGER.match(str(raw_movie_id))
        if match is None:
            raise ParameterError(INVALID_MOVIE_ID)

        return cls(
            movie_id=int(match.group(1)),
            role_name=params["roleName"] if "roleName" in params else None,
            actor_name=params["actorName"] if "actorName" in params else None,
            include_movie=params.get("movie") == "true",
        )

    def to_plan(self) -> QueryPlan:
        """Select the query plan for this request."""
        return QueryPlan.select(
            self.movie_id,
            role_name=self.role_name,
            actor_name=self.actor_name,
        )
