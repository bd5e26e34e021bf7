"""Cast storage protocol.

Defines the interface for any backend holding per-movie cast records
keyed by (movieId, actorName) with a secondary access path by roleName.

Implementations can include:
- DynamoDB table with a roleName index (default)
- Redis sorted-set indexes
- In-memory fakes for tests
"""

from typing import Any, Protocol, runtime_checkable

from cast_query.entities import QueryPlan


@runtime_checkable
class CastStore(Protocol):
    """Protocol for cast storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def query_cast(self, plan: QueryPlan) -> list[dict[str, Any]]:
        """Run a single cast query.

        Args:
            plan: Movie id plus optional roleName/actorName prefix filter

        Returns:
            Cast records in the order the backing index yields them
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
