"""Error Handlers - map every failure escaping a route onto one JSON error envelope.

Invariants:
    - EmployeeApiError answers its own http_status and to_response() body
    - SQLAlchemyError answers 503 DATABASE_ERROR (same mapping as the session manager)
    - RequestValidationError answers 400 with per-field details
    - Anything else answers 500 INTERNAL_ERROR; the exception text is only logged

Design Decisions:
    - 4xx domain errors log at WARNING, 5xx at ERROR
    - Body shape for validation and internal errors mirrors EmployeeApiError.to_response()
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from employee_api.core.errors import EmployeeApiError, ErrorSeverity
from employee_api.infrastructure.database import to_database_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(EmployeeApiError, _employee_api_error)
    app.add_exception_handler(SQLAlchemyError, _database_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _internal_error)


def _envelope(code: str, message: str, category: str, severity: ErrorSeverity, **extra) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category,
            "severity": severity.value,
            **extra,
        },
    }


def _respond(request: Request, exc: EmployeeApiError) -> JSONResponse:
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "employee_id": exc.context.employee_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _employee_api_error(request: Request, exc: EmployeeApiError) -> JSONResponse:
    return _respond(request, exc)


async def _database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    return _respond(request, to_database_error(exc))


async def _validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    logger.warning(
        f"Validation error on {request.url.path}: {exc.errors()}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data", "validation",
            ErrorSeverity.ERROR, details=details,
        ),
    )


async def _internal_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred", "internal",
            ErrorSeverity.CRITICAL,
        ),
    )
