"""Error Handlers — map exceptions onto the PassForge error envelope.

Invariants:
    - PassForgeError → its own code, category, severity and HTTP status
    - RequestValidationError → 400 VALIDATION_ERROR with field/message/type details
    - Anything else → 500 INTERNAL_ERROR, no exception text in the body
    - Submitted values never reach the logs (pydantic's `input` and `ctx` are dropped)

Design Decisions:
    - Handlers are plain module functions added with add_exception_handler,
      so tests can call them without building an app
    - Every log record carries error_code and path as extra fields for the JSON formatter
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import ErrorCategory, ErrorSeverity, PassForgeError

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PassForgeError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_domain_error(request: Request, exc: PassForgeError) -> JSONResponse:
    level = logging.WARNING if exc.http_status < 500 else logging.ERROR
    logger.log(
        level, exc.message,
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = field_errors(exc)
    logger.warning(
        "Request rejected: %d invalid field(s)", len(details),
        extra={
            "error_code": VALIDATION_ERROR,
            "path": request.url.path,
            "count": len(details),
            "fields": [d["field"] for d in details],
        },
    )
    return _envelope(
        status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR, "Invalid request data",
        ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled %s", type(exc).__name__,
        exc_info=exc,
        extra={"error_code": INTERNAL_ERROR, "path": request.url.path},
    )
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR,
        "An unexpected error occurred",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
    )


def field_errors(exc: RequestValidationError) -> list[dict]:
    """Location, message and type of each failure; the offending value is left out."""
    return [
        {
            "field": ".".join(str(part) for part in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


def _envelope(
    status_code: int,
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> JSONResponse:
    error = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error})
