"""Translation of domain and framework errors into JSON error responses."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from upload_gateway.modules.assets import ClientInputError, StorageError, UploadError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_status(exc: Exception) -> int:
    """Map an exception raised while handling a request to an HTTP status code."""
    if isinstance(exc, ClientInputError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, StarletteHTTPException):
        return exc.status_code
    if isinstance(exc, RequestValidationError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def upload_error_handler(request: Request, exc: UploadError) -> JSONResponse:
    status_code = error_status(exc)
    if isinstance(exc, StorageError) or status_code >= 500:
        logger.error("Upload error on %s: %s", request.url.path, exc)
        return error_response(status_code, INTERNAL_ERROR_MESSAGE)
    logger.warning("Rejected upload on %s: %s", request.url.path, exc.detail)
    return error_response(status_code, exc.detail)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(error_status(exc), str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid request on %s: %s", request.url.path, exc.errors())
    return error_response(error_status(exc), "Invalid request")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return error_response(error_status(exc), INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UploadError, upload_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "error_status",
    "register_exception_handlers",
]
