"""Handler for cast queries.

Converts raw query-string parameters into a service call and the result
into a status code, headers and JSON body. This is the single place
where errors are turned into responses.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from cast_query.dto import (
    CastQueryRequest,
    CastQueryResponse,
    ErrorResponse,
    HealthCheckResponse,
    MessageResponse,
    ParameterError,
)
from cast_query.log import get_logger
from cast_query.services import CastQueryService

logger = get_logger(__name__)

JSON_HEADERS = {"content-type": "application/json"}
DEFAULT_ERROR = "Internal Server Error"


@dataclass(frozen=True)
class HandlerResponse:
    """Status code, headers and JSON-ready body of a handled request."""

    status_code: int
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))

    @cached_property
    def body_json(self) -> str:
        """The body encoded once as JSON."""
        return json.dumps(self.body)


class CastHandler:
    """Handler for cast queries.

    This handler delegates the queries to CastQueryService and handles
    request-level concerns:
    - Validating movieId (400 with a fixed message)
    - Assembling the response body
    - Turning any other failure into a 500

    Example:
        ```python
        handler = CastHandler(cast_service=CastQueryService.create(cast_store, movie_store))
        response = await handler.handle({"movieId": "42", "movie": "true"})
        ```
    """

    def __init__(self, cast_service: CastQueryService) -> None:
        """Initialize the cast handler.

        Args:
            cast_service: The cast query service (required).
        """
        self._service = cast_service

    async def handle(self, params: Mapping[str, str] | None) -> HandlerResponse:
        """Handle a cast query.

        Args:
            params: Query-string parameters (movieId, roleName, actorName, movie)

        Returns:
            HandlerResponse with 200, 400 or 500
        """
        try:
            logger.info("cast_query_received", params=dict(params or {}))

            try:
                request = CastQueryRequest.from_params(params)
            except ParameterError as e:
                return HandlerResponse(
                    status_code=400,
                    body=MessageResponse(message=e.message).model_dump(),
                )

            result = await self._service.query(
                request.to_plan(),
                include_movie=request.include_movie,
            )

            response = HandlerResponse(
                status_code=200,
                body=CastQueryResponse.from_result(result).to_body(),
            )
            # Encode here so an unencodable record becomes a 500
            response.body_json
            return response

        except Exception as e:
            logger.exception("cast_query_failed", error=str(e))
            return HandlerResponse(
                status_code=500,
                body=ErrorResponse(error=str(e) or DEFAULT_ERROR).model_dump(),
            )

    async def health_check(self) -> dict[str, Any]:
        """Report whether both stores are reachable."""
        cast_healthy = self._service.cast_store.health_check()
        movie_healthy = self._service.movie_store.health_check()

        return HealthCheckResponse(
            status="healthy" if cast_healthy and movie_healthy else "unhealthy",
            cast_store_healthy=cast_healthy,
            movie_store_healthy=movie_healthy,
        ).model_dump()

    @property
    def service(self) -> CastQueryService:
        return self._service
