"""Cast query service.

Runs a query plan against the cast store and, when asked, attaches the
movie's metadata from the movie store.
"""

from cast_query.entities import CastQueryResult, QueryPlan, unknown_movie
from cast_query.log import get_logger
from cast_query.protocols import CastStore, MovieStore

logger = get_logger(__name__)


class CastQueryService:
    """Core cast query orchestration.

    This service depends on PROTOCOLS, not concrete implementations:
    - CastStore: DynamoDB, Redis, an in-memory fake, etc.
    - MovieStore: same

    Example:
        ```python
        from cast_query.repositories import create_stores
        from cast_query.services import CastQueryService

        cast_store, movie_store = create_stores()
        service = CastQueryService.create(cast_store, movie_store)
        result = await service.query(QueryPlan.select(42, role_name="Lead"))
        ```
    """

    def __init__(self, cast_store: CastStore, movie_store: MovieStore) -> None:
        """Initialize the cast query service.

        Args:
            cast_store: Cast storage backend (required).
            movie_store: Movie metadata backend (required).
        """
        self._cast_store = cast_store
        self._movie_store = movie_store

    @classmethod
    def create(cls, cast_store: CastStore, movie_store: MovieStore) -> "CastQueryService":
        """Factory method to create CastQueryService."""
        return cls(cast_store=cast_store, movie_store=movie_store)

    async def query(self, plan: QueryPlan, include_movie: bool = False) -> CastQueryResult:
        """Run a cast query.

        Business logic:
        1. Query the cast store with the plan (one call)
        2. If include_movie, look up the movie afterwards (one call)
        3. Fall back to the placeholder movie when none is stored

        Store errors propagate to the caller; the cast data is not
        returned on its own if the movie lookup fails.

        Args:
            plan: The cast query plan
            include_movie: Whether to attach movie metadata

        Returns:
            CastQueryResult with data and optional movie
        """
        logger.debug(
            "cast_query_plan",
            movie_id=plan.movie_id,
            shape=plan.shape.value,
            prefix=plan.prefix,
        )
        data = self._cast_store.query_cast(plan)

        if not include_movie:
            return CastQueryResult(data=data)

        movie = await self.get_movie(plan.movie_id)
        return CastQueryResult(data=data, movie=movie)

    async def get_movie(self, movie_id: int) -> dict:
        """Get movie metadata, or the placeholder if there is none."""
        movie = self._movie_store.get_movie(movie_id)
        if movie is None:
            return unknown_movie()
        return movie

    @property
    def cast_store(self) -> CastStore:
        """Get the underlying cast store."""
        return self._cast_store

    @property
    def movie_store(self) -> MovieStore:
        """Get the underlying movie store."""
        return self._movie_store
