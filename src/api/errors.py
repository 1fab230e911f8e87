"""
Exception handlers - map domain errors to HTTP responses.

Domain errors carry no HTTP knowledge; this module is the only place
where they are translated. Store failures are logged with their cause
and surfaced to clients as a generic 503.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.domain.exceptions import ConcurrentUpdate, InvalidArgument, StoreError

logger = logging.getLogger(__name__)


async def invalid_argument_handler(request: Request, exc: InvalidArgument) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


async def concurrent_update_handler(request: Request, exc: ConcurrentUpdate) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Concurrent update, retry the request"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install domain exception handlers on an application."""
    app.add_exception_handler(InvalidArgument, invalid_argument_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(ConcurrentUpdate, concurrent_update_handler)
