"""Redis implementations of CastStore and MovieStore.

Records are stored as JSON strings. Prefix queries run on sorted sets
whose members all share score 0, so ZRANGEBYLEX walks them in byte
order, the same order a DynamoDB range key gives.

Key layout:
    {cast_table}:{movieId}:{actorName}   -> cast record (JSON)
    {cast_table}:{movieId}               -> actorName index (zset)
    {cast_table}:{index}:{movieId}       -> roleName\\x00actorName index (zset)
    {movie_table}:{movieId}              -> movie record (JSON)
"""

import json
from typing import Any

import redis

from cast_query.config import get_redis_client, settings
from cast_query.entities import QueryPlan, QueryShape

ROLE_SEPARATOR = b"\x00"


def lex_range(prefix: str | None) -> tuple[bytes, bytes]:
    """Build ZRANGEBYLEX bounds matching every member starting with prefix.

    Args:
        prefix: The begins-with value; None or empty matches everything

    Returns:
        (min, max) bounds
    """
    if not prefix:
        return b"-", b"+"
    encoded = prefix.encode()
    # 0xff never appears in UTF-8, so it sorts after any continuation
    return b"[" + encoded, b"[" + encoded + b"\xff"


class RedisCastRepository:
    """Redis implementation of the CastStore protocol."""

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        table_name: str | None = None,
        role_index_name: str | None = None,
    ) -> None:
        """Initialize the Redis cast repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
            table_name: Key prefix for cast data. If None, uses settings.
            role_index_name: Name of the roleName index. If None, uses settings.
        """
        self._client = redis_client or get_redis_client()
        self._table_name = table_name or settings.cast_table_name
        self._role_index_name = role_index_name or settings.cast_role_index_name

    @classmethod
    def create(
        cls,
        redis_client: redis.Redis | None = None,
        table_name: str | None = None,
        role_index_name: str | None = None,
    ) -> "RedisCastRepository":
        """Factory method to create RedisCastRepository with defaults."""
        return cls(
            redis_client=redis_client,
            table_name=table_name,
            role_index_name=role_index_name,
        )

    def record_key(self, movie_id: int, actor_name: str) -> str:
        return f"{self._table_name}:{movie_id}:{actor_name}"

    def actor_index_key(self, movie_id: int) -> str:
        return f"{self._table_name}:{movie_id}"

    def role_index_key(self, movie_id: int) -> str:
        return f"{self._table_name}:{self._role_index_name}:{movie_id}"

    def put_cast(self, record: dict[str, Any]) -> str:
        """Store a cast record and index it.

        Args:
            record: Cast record with at least movieId and actorName

        Returns:
            The storage key for the record
        """
        movie_id = int(record["movieId"])
        actor_name = str(record["actorName"])
        key = self.record_key(movie_id, actor_name)
        role_index_key = self.role_index_key(movie_id)

        old_member = self._role_member(self._client.get(key), actor_name)
        new_member = self._role_member(record, actor_name)

        pipe = self._client.pipeline()
        pipe.set(key, json.dumps(record))
        pipe.zadd(self.actor_index_key(movie_id), {actor_name.encode(): 0})
        if old_member is not None and old_member != new_member:
            pipe.zrem(role_index_key, old_member)
        if new_member is not None:
            pipe.zadd(role_index_key, {new_member: 0})
        pipe.execute()

        return key

    @staticmethod
    def _role_member(record: dict[str, Any] | bytes | None, actor_name: str) -> bytes | None:
        """Role index member for a record (stored JSON or dict), if it has a roleName."""
        if isinstance(record, (bytes, str)):
            record = json.loads(record)
        if not record or record.get("roleName") is None:
            return None
        return str(record["roleName"]).encode() + ROLE_SEPARATOR + actor_name.encode()

    def _actor_names(self, plan: QueryPlan) -> list[str]:
        low, high = lex_range(plan.prefix)

        if plan.shape is QueryShape.ROLE_PREFIX:
            members = self._client.zrangebylex(self.role_index_key(plan.movie_id), low, high)
            return [m.split(ROLE_SEPARATOR, 1)[1].decode() for m in members]

        # MOVIE plans carry no prefix, so the range covers the whole index
        members = self._client.zrangebylex(self.actor_index_key(plan.movie_id), low, high)
        return [m.decode() for m in members]

    def query_cast(self, plan: QueryPlan) -> list[dict[str, Any]]:
        """Run the plan against the Redis indexes.

        Args:
            plan: The cast query plan

        Returns:
            Cast records in index order
        """
        actor_names = self._actor_names(plan)
        if not actor_names:
            return []

        keys = [self.record_key(plan.movie_id, name) for name in actor_names]
        raw_records = self._client.mget(keys)

        # Index entries whose record has been deleted are skipped
        return [json.loads(raw) for raw in raw_records if raw is not None]

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client


class RedisMovieRepository:
    """Redis implementation of the MovieStore protocol."""

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        table_name: str | None = None,
    ) -> None:
        self._client = redis_client or get_redis_client()
        self._table_name = table_name or settings.movie_table_name

    @classmethod
    def create(
        cls,
        redis_client: redis.Redis | None = None,
        table_name: str | None = None,
    ) -> "RedisMovieRepository":
        """Factory method to create RedisMovieRepository with defaults."""
        return cls(redis_client=redis_client, table_name=table_name)

    def record_key(self, movie_id: int) -> str:
        return f"{self._table_name}:{movie_id}"

    def put_movie(self, record: dict[str, Any]) -> str:
        """Store a movie record keyed by its movieId."""
        key = self.record_key(int(record["movieId"]))
        self._client.set(key, json.dumps(record))
        return key

    def get_movie(self, movie_id: int) -> dict[str, Any] | None:
        raw = self._client.get(self.record_key(movie_id))
        if raw is None:
            return None
        return json.loads(raw)

    def health_check(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
