"""Serverless entry point.

``handler(event, context)`` accepts an API-gateway style event and
returns ``{"statusCode", "headers", "body"}`` with a JSON string body.
The CastHandler and its store clients are created on the first
invocation and reused by later invocations in the same process.
"""

import asyncio
import json
from typing import Any

from cast_query.api.dependencies import build_handler
from cast_query.config import settings
from cast_query.handlers import CastHandler, HandlerResponse
from cast_query.handlers.cast_handler import DEFAULT_ERROR
from cast_query.log import configure_logging, get_logger

configure_logging(settings.log_level, settings.log_json)
logger = get_logger(__name__)

_cast_handler: CastHandler | None = None


def get_cast_handler() -> CastHandler:
    """Get or create the process-wide cast handler."""
    global _cast_handler
    if _cast_handler is None:
        _cast_handler = build_handler()
    return _cast_handler


def set_cast_handler(cast_handler: CastHandler | None) -> None:
    """Replace the process-wide cast handler (None resets it)."""
    global _cast_handler
    _cast_handler = cast_handler


def handler(event: dict[str, Any] | None, context: Any = None) -> dict[str, Any]:
    """Handle a single invocation.

    Args:
        event: Event with optional queryStringParameters
        context: Runtime context (unused)

    Returns:
        Dict with statusCode, headers and a JSON-encoded body
    """
    logger.info("event_received", payload=json.dumps(event, default=str))

    params = (event or {}).get("queryStringParameters")
    try:
        cast_handler = get_cast_handler()
    except Exception as e:
        logger.exception("cast_handler_init_failed", error=str(e))
        response = HandlerResponse(status_code=500, body={"error": str(e) or DEFAULT_ERROR})
    else:
        response = asyncio.run(cast_handler.handle(params))

    return {
        "statusCode": response.status_code,
        "headers": response.headers,
        "body": response.body_json,
    }
