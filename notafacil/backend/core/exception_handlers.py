"""
Exception Handlers.

Turn exceptions raised while serving a request into the ErrorResponse
envelope. Application errors keep their message and code; request
validation failures list the offending fields; anything else becomes a
generic 500 that never leaks the exception message.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from notafacil.backend.core.exceptions import (
    ApplicationError,
    ConflictError,
    DatabaseError,
    ImportDataError,
    ImportFormatError,
    NotFoundError,
    ValidationError,
)
from notafacil.backend.core.logging import get_logger
from notafacil.backend.schemas.base import ErrorDetail, ErrorResponse, ResponseMetadata

logger = get_logger(__name__)

EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    ValidationError: 400,
    ImportFormatError: 400,
    ImportDataError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    DatabaseError: 503,
}


def _get_request_id(request: Request) -> str | None:
    """Request ID set by the middleware, else the one the client sent."""
    if hasattr(request.state, "request_id"):
        return request.state.request_id
    return request.headers.get("x-request-id")


def _status_for(exc: ApplicationError) -> int:
    # Nearest mapped ancestor, so subclasses inherit their parent's status
    for cls in type(exc).__mro__:
        if cls in EXCEPTION_STATUS_MAP:
            return EXCEPTION_STATUS_MAP[cls]
    return 500


def _error_details(exc: ApplicationError) -> dict[str, Any] | None:
    if isinstance(exc, ValidationError) and exc.details:
        return exc.details
    if isinstance(exc, ImportDataError) and exc.record_index is not None:
        return {"record_index": exc.record_index}
    return None


def _detailed_errors_enabled() -> bool:
    from notafacil.backend.core.config import get_app_config

    return get_app_config().features.api_detailed_errors


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    response = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details),
        metadata=ResponseMetadata(request_id=_get_request_id(request)),
    )
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))


def _log_fields(request: Request, **fields: Any) -> dict[str, Any]:
    return {
        "path": request.url.path,
        "method": request.method,
        "request_id": _get_request_id(request),
        **fields,
    }


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """Map an ApplicationError to its HTTP status (500 when unmapped)."""
    status_code = _status_for(exc)
    extra = _log_fields(request, code=exc.code, message=exc.message, status=status_code)

    if status_code >= 500:
        logger.error("Server error", extra=extra)
    else:
        logger.warning("Client error", extra=extra)

    return _error_response(request, status_code, exc.code, exc.message, _error_details(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request body, query and path validation failures as 422."""
    errors = exc.errors()
    logger.warning("Request validation failed", extra=_log_fields(request, error_count=len(errors)))

    details = {
        "validation_errors": [
            {
                "field": ".".join(str(part) for part in err.get("loc", [])),
                "message": err.get("msg", "Validation error"),
                "type": err.get("type", "unknown"),
            }
            for err in errors
        ]
    }
    return _error_response(request, 422, "VAL_REQUEST_INVALID", "Request validation failed", details)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all for exceptions no other handler claims.

    The exception type is only exposed when the api_detailed_errors
    feature flag is on; the message never is.
    """
    exception_type = type(exc).__name__
    logger.exception("Unhandled exception", extra=_log_fields(request, exception_type=exception_type))

    details = {"exception_type": exception_type} if _detailed_errors_enabled() else None
    return _error_response(request, 500, "SYS_INTERNAL_ERROR", "An unexpected error occurred", details)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
