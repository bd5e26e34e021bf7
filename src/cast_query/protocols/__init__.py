"""Protocol interfaces for swappable store implementations.

Protocols enable:
- Easy swapping of implementations (DynamoDB → Redis, in-memory fakes, etc.)
- Unit testing with mock implementations
- Clear separation of concerns

Usage:
    ```python
    from cast_query.protocols import CastStore, MovieStore

    store: CastStore = DynamoCastRepository.create()  # works
    store: CastStore = RedisCastRepository.create()   # also works
    ```
"""

from .cast_store import CastStore
from .movie_store import MovieStore

__all__ = [
    "CastStore",
    "MovieStore",
]
