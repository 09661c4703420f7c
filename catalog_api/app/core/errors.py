"""
Error taxonomy and exception handlers.

Services raise subclasses of :class:`ApiError`; the handlers installed
by :func:`register_exception_handlers` turn them into JSON bodies of the
form ``{"error": ..., "message": ..., **extra}``.  Framework errors
(malformed JSON, unknown routes, unexpected exceptions) are rendered in
the same shape so clients only ever see one error format.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        error: str,
        message: str,
        headers: Optional[Dict[str, str]] = None,
        **extra: Any,
    ) -> None:
        super().__init__(message)
        self.error = error
        self.message = message
        self.headers = headers
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error, "message": self.message}
        body.update(self.extra)
        return body


class BadRequestError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ApiError):
    status_code = status.HTTP_409_CONFLICT


class MethodNotAllowedError(ApiError):
    """Raised for methods a fixed-method resource does not support."""

    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, allowed: Iterable[str]) -> None:
        allowed = list(allowed)
        super().__init__(
            "Method not allowed",
            f"This endpoint only accepts {' and '.join(allowed)}",
            headers={"Allow": ", ".join(allowed)},
            allowedMethods=allowed,
        )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning(
        "%s %s rejected with %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparsable or wrongly shaped request bodies as HTTP 400."""
    logger.warning("%s %s invalid request: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request",
            "message": "Malformed JSON or request body is not a JSON object",
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle routing errors raised by the framework itself (404, 405)."""
    logger.warning(
        "%s %s failed with %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.detail,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail), "message": f"{request.method} {request.url.path}: {exc.detail}"},
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unexpected error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "message": "The request could not be completed"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
