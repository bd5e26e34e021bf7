"""Cast Query - movie cast lookups over a key/range store.

This package provides a layered architecture for cast queries:

Layers:
    - protocols: Interface contracts (CastStore, MovieStore)
    - repositories: Data access implementations (DynamoDB, Redis)
    - services: Business logic
    - handlers: Request/response handling
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from cast_query.repositories import create_stores
    from cast_query.services import CastQueryService
    from cast_query.handlers import CastHandler

    cast_store, movie_store = create_stores()
    handler = CastHandler(CastQueryService.create(cast_store, movie_store))
    response = await handler.handle({"movieId": "42", "roleName": "Lead"})
    ```

For HTTP API:
    ```python
    from cast_query.api.app import app
    ```

For serverless deployments:
    ```python
    from cast_query.lambda_function import handler
    ```
"""

from cast_query.config import get_dynamodb_resource, get_redis_client, settings
from cast_query.dto import CastQueryRequest, CastQueryResponse
from cast_query.entities import CastQueryResult, QueryPlan, QueryShape
from cast_query.handlers import CastHandler, HandlerResponse
from cast_query.protocols import CastStore, MovieStore
from cast_query.repositories import (
    DynamoCastRepository,
    DynamoMovieRepository,
    RedisCastRepository,
    RedisMovieRepository,
    create_stores,
)
from cast_query.services import CastQueryService

__all__ = [
    # Configuration
    "settings",
    "get_dynamodb_resource",
    "get_redis_client",
    # Protocols (interfaces)
    "CastStore",
    "MovieStore",
    # Services (business logic)
    "CastQueryService",
    # Handlers
    "CastHandler",
    "HandlerResponse",
    # Repositories (data access)
    "DynamoCastRepository",
    "DynamoMovieRepository",
    "RedisCastRepository",
    "RedisMovieRepository",
    "create_stores",
    # Entities (domain models)
    "CastQueryResult",
    "QueryPlan",
    "QueryShape",
    # DTOs (API contracts)
    "CastQueryRequest",
    "CastQueryResponse",
]
