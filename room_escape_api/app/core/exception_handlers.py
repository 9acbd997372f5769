"""Translate domain errors into JSON error responses."""

import logging
from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.responses import Response

from .exceptions import AuthenticationError, RoomEscapeError

ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

logger = logging.getLogger(__name__)


async def room_escape_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RoomEscapeError) else RoomEscapeError(str(exc))
    logger.warning("%s %s rejected: %s", request.method, request.url.path, error.message)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(error, AuthenticationError) else None
    return JSONResponse(
        status_code=error.status_code,
        content={"detail": error.message},
        headers=headers,
    )


EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    RoomEscapeError: room_escape_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
