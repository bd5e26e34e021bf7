"""Dependency injection configuration for the FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Handler (with its service and stores) stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - A handler placed in app.state beforehand is used as-is
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from cast_query.config import settings
from cast_query.handlers import CastHandler
from cast_query.log import get_logger
from cast_query.repositories import create_stores
from cast_query.services import CastQueryService

logger = get_logger(__name__)


def build_handler(backend: str | None = None) -> CastHandler:
    """Wire stores, service and handler for the configured backend.

    Args:
        backend: "dynamodb" or "redis". If None, uses settings.

    Returns:
        A ready CastHandler
    """
    cast_store, movie_store = create_stores(backend)
    cast_service = CastQueryService.create(cast_store=cast_store, movie_store=movie_store)
    return CastHandler(cast_service=cast_service)


def get_handler(request: Request) -> CastHandler:
    """Dependency injection for CastHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The CastHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "cast_handler", None)
    if handler is None:
        raise RuntimeError("CastHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Builds the handler once at startup unless one is already in
    app.state, and removes the one it built on shutdown.

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    created = getattr(app.state, "cast_handler", None) is None
    if created:
        app.state.cast_handler = build_handler()

    logger.info(
        "cast_query_started",
        backend=settings.store_backend,
        cast_table=settings.cast_table_name,
        movie_table=settings.movie_table_name,
    )

    yield

    if created:
        del app.state.cast_handler
    logger.info("cast_query_stopped")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[CastHandler, Depends(get_handler)]
