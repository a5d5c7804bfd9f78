"""
Typed failures and their HTTP translation.

Repositories and services raise these; only the handlers below know about
status codes.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .responses import error_response

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"
INVALID_ID = "Invalid Id"
INVALID_BODY = "Invalid request body"


class RecipeApiError(Exception):
    pass


class NotFoundError(RecipeApiError):
    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(f"{resource} {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


# Driver failures are explicit and separable from programming errors.
class DatabaseError(RecipeApiError):
    pass


async def _not_found_handler(_: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_response(INVALID_ID, f"{exc.resource} not found"),
    )


async def _database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    # Cause was already logged with traceback where it was raised.
    logger.error("database_error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response(INTERNAL_ERROR),
    )


async def _validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    missing = [
        str(err["loc"][-1])
        for err in exc.errors()
        if err.get("type") == "missing" and err.get("loc")
    ]
    message = f"Missing fields: {', '.join(missing)}" if missing else None
    return JSONResponse(
        status_code=422,
        content=error_response(INVALID_BODY, message),
    )


async def _http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response(INTERNAL_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(DatabaseError, _database_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
