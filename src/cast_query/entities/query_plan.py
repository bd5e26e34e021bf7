"""Cast query plan domain entity."""

from dataclasses import dataclass
from enum import Enum


class QueryShape(str, Enum):
    """The three ways the cast store can be queried."""

    MOVIE = "movie"
    ROLE_PREFIX = "role_prefix"
    ACTOR_PREFIX = "actor_prefix"


@dataclass(frozen=True)
class QueryPlan:
    """Domain entity describing a single cast store query.

    Attributes:
        movie_id: Exact-match movie identifier
        shape: Which key structure the query runs against
        prefix: Begins-with value for roleName or actorName (None for MOVIE)
    """

    movie_id: int
    shape: QueryShape = QueryShape.MOVIE
    prefix: str | None = None

    @classmethod
    def select(
        cls,
        movie_id: int,
        role_name: str | None = None,
        actor_name: str | None = None,
    ) -> "QueryPlan":
        """Pick the query shape for a request.

        roleName wins over actorName when both are given; actorName is
        then ignored.

        Args:
            movie_id: The movie to query
            role_name: Optional roleName prefix
            actor_name: Optional actorName prefix

        Returns:
            The selected QueryPlan
        """
        if role_name is not None:
            return cls(movie_id=movie_id, shape=QueryShape.ROLE_PREFIX, prefix=role_name)
        if actor_name is not None:
            return cls(movie_id=movie_id, shape=QueryShape.ACTOR_PREFIX, prefix=actor_name)
        return cls(movie_id=movie_id)

    @property
    def uses_role_index(self) -> bool:
        """Whether the plan runs against the roleName secondary index."""
        return self.shape is QueryShape.ROLE_PREFIX
