"""Cast query result domain entity."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CastQueryResult:
    """Domain entity for the outcome of a cast query.

    Attributes:
        data: Cast records in the order the store returned them
        movie: Movie metadata, or None when enrichment was not requested
    """

    data: list[dict[str, Any]] = field(default_factory=list)
    movie: dict[str, Any] | None = None

    @property
    def has_movie(self) -> bool:
        return self.movie is not None
