"""Exception handlers turning shortener errors into plain-text responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shrtn.errors import ShortenerError, NotFoundError, MethodNotAllowed

logger = logging.getLogger("shrtn.web")


async def shortener_error_handler(request: Request, exc: ShortenerError) -> PlainTextResponse:
    """Answer a ShortenerError with its status code and message."""
    if exc.status_code >= 500:
        logger.error(f"Error in {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Route the framework's own 404 and 405 through the shortener errors.

    A request with the wrong method is answered 404, the same as an unknown path.
    """
    if exc.status_code == 405:
        return await shortener_error_handler(request, MethodNotAllowed())
    if exc.status_code == 404:
        return await shortener_error_handler(request, NotFoundError())
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(ShortenerError, shortener_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
