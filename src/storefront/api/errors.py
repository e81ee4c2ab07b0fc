"""Exception handlers mapping domain failures to HTTP responses.

Every error body has the shape ``{"error": <message or field dict>}``.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from storefront.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    StorefrontError,
    UnauthorizedError,
)

logger = structlog.get_logger(__name__)

_STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    InvalidStateError: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


async def storefront_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        (code for error_cls, code in _STATUS_BY_ERROR.items() if isinstance(exc, error_cls)),
        status.HTTP_400_BAD_REQUEST,
    )
    message = exc.message if isinstance(exc, StorefrontError) else str(exc)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None

    logger.info(
        "Operation failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=status_code,
        error=message,
    )
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    messages = exc.messages if isinstance(exc, ValidationError) else str(exc)
    logger.info("Validation failed", path=request.url.path, error=messages)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": messages})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception",
        method=request.method,
        path=request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
