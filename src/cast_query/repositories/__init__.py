"""Repository layer for data access.

This layer hides the backing stores (DynamoDB, Redis) behind the
protocol-based interfaces in cast_query.protocols. The repositories are
protocol-based (structural typing), not inheritance-based.
"""

from cast_query.config import get_redis_client, settings
from cast_query.protocols import CastStore, MovieStore

from .dynamodb_repository import DynamoCastRepository, DynamoMovieRepository
from .redis_repository import RedisCastRepository, RedisMovieRepository


def create_stores(backend: str | None = None) -> tuple[CastStore, MovieStore]:
    """Build the cast and movie stores for the configured backend.

    Args:
        backend: "dynamodb" or "redis". If None, uses settings.

    Returns:
        (cast_store, movie_store)
    """
    backend = backend or settings.store_backend

    if backend == "dynamodb":
        return DynamoCastRepository.create(), DynamoMovieRepository.create()
    if backend == "redis":
        client = get_redis_client()
        return (
            RedisCastRepository.create(redis_client=client),
            RedisMovieRepository.create(redis_client=client),
        )
    raise ValueError(f"Unknown store backend: {backend!r}")


__all__ = [
    "CastStore",
    "MovieStore",
    "DynamoCastRepository",
    "DynamoMovieRepository",
    "RedisCastRepository",
    "RedisMovieRepository",
    "create_stores",
]
