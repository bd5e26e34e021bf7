from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from cast_query.api.dependencies import HandlerDep, lifespan
from cast_query.config import settings
from cast_query.handlers import CastHandler
from cast_query.log import configure_logging


def create_app(handler: CastHandler | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        handler: Pre-built handler. If None, the lifespan builds one
            from settings.

    Returns:
        The configured FastAPI app
    """
    app = FastAPI(
        title="Cast Query API",
        description="Movie cast lookups with optional movie metadata",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if handler is not None:
        app.state.cast_handler = handler

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Cast Query API",
            "version": "0.1.0",
            "description": "Movie cast lookups with optional movie metadata",
            "endpoints": {
                "cast": "/cast",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health")
    async def health(handler: HandlerDep) -> JSONResponse:
        """Health check endpoint."""
        report = await handler.health_check()
        status_code = (
            status.HTTP_200_OK
            if report["status"] == "healthy"
            else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        return JSONResponse(status_code=status_code, content=report)

    @app.get("/cast")
    async def get_cast(request: Request, handler: HandlerDep) -> Response:
        """
        List the cast of a movie.

        Query parameters are passed through untouched: movieId (required),
        roleName or actorName (prefix filters), movie=true (attach metadata).
        """
        response = await handler.handle(dict(request.query_params))
        return Response(
            content=response.body_json,
            status_code=response.status_code,
            headers=response.headers,
            media_type="application/json",
        )

    return app


configure_logging(settings.log_level, settings.log_json)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cast_query.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
