"""Movie metadata storage protocol."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MovieStore(Protocol):
    """Protocol for movie metadata backends."""

    def get_movie(self, movie_id: int) -> dict[str, Any] | None:
        """Look up movie metadata.

        Args:
            movie_id: The movie identifier

        Returns:
            The first matching record, or None if there is none
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
