"""DynamoDB implementations of CastStore and MovieStore.

The cast table is keyed by movieId (hash) and actorName (range), with a
secondary index on (movieId, roleName). Both repositories share the
process-wide boto3 resource from config.
"""

import base64
from decimal import Decimal
from typing import Any

from boto3.dynamodb.conditions import Key
from boto3.dynamodb.types import Binary
from botocore.exceptions import BotoCoreError, ClientError

from cast_query.config import get_dynamodb_resource, settings
from cast_query.entities import QueryPlan, QueryShape
from cast_query.log import get_logger

logger = get_logger(__name__)


def from_dynamo(value: Any) -> Any:
    """Convert DynamoDB Decimals and Binary values into JSON-friendly types.

    Numbers become ints or floats, binary values become base64 strings
    and sets become sorted lists.

    Args:
        value: An item, list or scalar returned by the boto3 resource

    Returns:
        The same structure with JSON-friendly values
    """
    if isinstance(value, Binary):
        return base64.b64encode(value.value).decode()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode()
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: from_dynamo(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [from_dynamo(v) for v in value]
    if isinstance(value, (set, frozenset)):
        # Convert first: Binary has no ordering, its base64 form does
        return sorted(from_dynamo(v) for v in value)
    return value


def _table_is_reachable(table) -> bool:
    try:
        table.load()
        return True
    except (BotoCoreError, ClientError) as e:
        logger.warning("dynamodb_health_check_failed", table=table.name, error=str(e))
        return False


class DynamoCastRepository:
    """DynamoDB implementation of the CastStore protocol.

    Each plan maps to exactly one Query call:
    - MOVIE: movieId = :m
    - ROLE_PREFIX: movieId = :m and begins_with(roleName, :r) on the role index
    - ACTOR_PREFIX: movieId = :m and begins_with(actorName, :a)
    """

    def __init__(
        self,
        resource=None,
        table_name: str | None = None,
        role_index_name: str | None = None,
    ) -> None:
        """Initialize the cast repository.

        Args:
            resource: boto3 DynamoDB resource. If None, uses the shared one.
            table_name: Cast table name. If None, uses settings.
            role_index_name: Name of the roleName index. If None, uses settings.
        """
        resource = resource or get_dynamodb_resource()
        self._table = resource.Table(table_name or settings.cast_table_name)
        self._role_index_name = role_index_name or settings.cast_role_index_name

    @classmethod
    def create(
        cls,
        table_name: str | None = None,
        role_index_name: str | None = None,
    ) -> "DynamoCastRepository":
        """Factory method to create DynamoCastRepository with defaults."""
        return cls(table_name=table_name, role_index_name=role_index_name)

    def build_query(self, plan: QueryPlan) -> dict[str, Any]:
        """Translate a plan into Table.query keyword arguments.

        Args:
            plan: The cast query plan

        Returns:
            Keyword arguments for a single Query call
        """
        condition = Key("movieId").eq(plan.movie_id)

        if plan.shape is QueryShape.ROLE_PREFIX:
            return {
                "IndexName": self._role_index_name,
                "KeyConditionExpression": condition & Key("roleName").begins_with(plan.prefix),
            }
        if plan.shape is QueryShape.ACTOR_PREFIX:
            return {
                "KeyConditionExpression": condition & Key("actorName").begins_with(plan.prefix),
            }
        return {"KeyConditionExpression": condition}

    def query_cast(self, plan: QueryPlan) -> list[dict[str, Any]]:
        """Run the plan against the cast table.

        Args:
            plan: The cast query plan

        Returns:
            Items in index order, numbers converted from Decimal
        """
        response = self._table.query(**self.build_query(plan))
        return [from_dynamo(item) for item in response.get("Items", [])]

    def health_check(self) -> bool:
        """Check if the cast table is reachable."""
        return _table_is_reachable(self._table)

    @property
    def table(self):
        """Get the underlying boto3 Table."""
        return self._table


class DynamoMovieRepository:
    """DynamoDB implementation of the MovieStore protocol."""

    def __init__(self, resource=None, table_name: str | None = None) -> None:
        resource = resource or get_dynamodb_resource()
        self._table = resource.Table(table_name or settings.movie_table_name)

    @classmethod
    def create(cls, table_name: str | None = None) -> "DynamoMovieRepository":
        """Factory method to create DynamoMovieRepository with defaults."""
        return cls(table_name=table_name)

    def get_movie(self, movie_id: int) -> dict[str, Any] | None:
        """Query the movie table and return the first record, if any.

        Args:
            movie_id: The movie identifier

        Returns:
            The first matching item, or None
        """
        response = self._table.query(KeyConditionExpression=Key("movieId").eq(movie_id))
        items = response.get("Items") or []
        if not items:
            return None
        return from_dynamo(items[0])

    def health_check(self) -> bool:
        """Check if the movie table is reachable."""
        return _table_is_reachable(self._table)

    @property
    def table(self):
        """Get the underlying boto3 Table."""
        return self._table
