#!/usr/bin/env python3
"""
Demo script for cast queries.

This script seeds the Redis backend with a small cast list and movie
record, then runs each query shape through the handler.

Requires a running Redis: docker run -p 6379:6379 redis
"""

import asyncio
import json

from cast_query.config import get_redis_client
from cast_query.handlers import CastHandler
from cast_query.repositories import RedisCastRepository, RedisMovieRepository
from cast_query.services import CastQueryService

MOVIE_ID = 1234

CAST = [
    {"movieId": MOVIE_ID, "actorName": "Joe Bloggs", "roleName": "Male Character 1", "roleDescription": "leading role"},
    {"movieId": MOVIE_ID, "actorName": "Alice Broggs", "roleName": "Female Character 1", "roleDescription": "leading role"},
    {"movieId": MOVIE_ID, "actorName": "Joe Cloggs", "roleName": "Male Character 2", "roleDescription": "supporting role"},
    {"movieId": MOVIE_ID, "actorName": "Alice Droggs", "roleName": "Female Character 2", "roleDescription": "supporting role"},
]

MOVIE = {
    "movieId": MOVIE_ID,
    "title": "Example Movie",
    "genreIds": [28, 12],
    "overview": "A film that exists only to be queried.",
}


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def main() -> None:
    client = get_redis_client()
    cast_store = RedisCastRepository.create(redis_client=client)
    movie_store = RedisMovieRepository.create(redis_client=client)

    print_section("Seeding")
    for record in CAST:
        print(f"  ✓ Stored: {cast_store.put_cast(record)}")
    print(f"  ✓ Stored: {movie_store.put_movie(MOVIE)}")

    handler = CastHandler(CastQueryService.create(cast_store, movie_store))

    queries = [
        {},
        {"movieId": "abc"},
        {"movieId": str(MOVIE_ID)},
        {"movieId": str(MOVIE_ID), "actorName": "Joe"},
        {"movieId": str(MOVIE_ID), "roleName": "Female"},
        {"movieId": str(MOVIE_ID), "roleName": "Male", "movie": "true"},
        {"movieId": "999", "movie": "true"},
    ]

    for params in queries:
        print_section(f"Query: {params}")
        response = await handler.handle(params)
        print(f"  Status: {response.status_code}")
        print(json.dumps(response.body, indent=2))


if __name__ == "__main__":
    asyncio.run(main())
