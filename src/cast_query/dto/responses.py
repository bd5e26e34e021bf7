"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field

from cast_query.entities import CastQueryResult


class CastQueryResponse(BaseModel):
    """Response DTO for a successful cast query.

    The movie field is only serialized when enrichment was requested.
    """

    data: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Cast records in store order",
    )
    movie: dict[str, Any] | None = Field(
        None,
        description="Movie metadata (title, genreIds, overview)",
    )

    @classmethod
    def from_result(cls, result: CastQueryResult) -> "CastQueryResponse":
        if result.has_movie:
            return cls(data=result.data, movie=result.movie)
        return cls(data=result.data)

    def to_body(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict, leaving out an unset movie field."""
        return self.model_dump(exclude_unset=True)


class MessageResponse(BaseModel):
    """Response DTO for client errors (400)."""

    message: str = Field(..., description="What is wrong with the request")


class ErrorResponse(BaseModel):
    """Response DTO for server errors (500)."""

    error: str = Field(..., description="Error message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cast_store_healthy: bool = Field(..., description="Whether the cast store is reachable")
    movie_store_healthy: bool = Field(..., description="Whether the movie store is reachable")
