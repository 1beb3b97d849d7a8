"""
Global exception handlers for FastAPI.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import AppException, StoreUnavailable, ValidationError

logger = logging.getLogger(__name__)


def _error_body(exc: AppException) -> dict:
    return {
        "error": exc.message,
        "detail": exc.detail,
        "status_code": exc.status_code,
    }


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions."""
    log = logger.error if isinstance(exc, StoreUnavailable) else logger.info
    log(
        "%s %s failed: %s",
        request.method,
        request.url.path,
        exc.message,
        extra={"status_code": exc.status_code},
    )
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc))


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Reject a create and echo the submitted item back."""
    logger.info("Rejected guitar %r: %s", exc.name, exc.message)
    content = _error_body(exc)
    content["name"] = exc.name
    return JSONResponse(status_code=exc.status_code, content=content)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "status_code": exc.status_code,
        },
        headers=getattr(exc, "headers", None),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors raised by FastAPI itself."""
    errors = exc.errors()
    logger.warning(
        "Validation error on %s %s: %s",
        request.method,
        request.url.path,
        errors,
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation error",
            "detail": [{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in errors],
            "status_code": status.HTTP_422_UNPROCESSABLE_ENTITY,
        },
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other unhandled exceptions."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": "An unexpected error occurred",
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler above to ``app``.

    The most specific exception class must be registered alongside its
    base; Starlette walks the MRO so ``ValidationError`` reaches its own
    handler before ``AppException``.
    """
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
