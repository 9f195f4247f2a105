"""
Exception handling for the HTTP layer.

Engine errors propagate out of the service layer unchanged; the handlers
registered here turn them into JSON error responses:

- ValidationError -> 400
- DecodeError     -> 400
- EncodeError     -> 500
"""

import functools
import logging
from typing import Callable

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from core.exceptions import DecodeError, EncodeError, ImageEngineError, ValidationError

logger = logging.getLogger(__name__)

STATUS_CODES = {
    ValidationError: 400,
    DecodeError: 400,
    EncodeError: 500,
}


def status_code_for(exc: ImageEngineError) -> int:
    """HTTP status for an engine error (500 for unmapped subclasses)."""
    for error_type, status_code in STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return 500


async def engine_error_handler(request: Request, exc: ImageEngineError) -> JSONResponse:
    """Convert engine errors to structured JSON responses."""
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach engine error handlers to the application."""
    app.add_exception_handler(ImageEngineError, engine_error_handler)


def safe_endpoint(func: Callable) -> Callable:
    """
    Wrap an async endpoint so unexpected exceptions become HTTP 500.

    HTTPException and engine errors are re-raised untouched so their own
    handlers produce the response.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (HTTPException, ImageEngineError):
            raise
        except Exception as e:
            logger.error(f"Unhandled error in {func.__name__}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    return wrapper
