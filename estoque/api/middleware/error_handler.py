"""
Error handling middleware.

Standardizes all API error responses to include:
- error_code: machine-readable identifier
- message: human-readable description in the configured language
- hint: suggested recovery action
- errors: every field-level violation for validation failures

Storage and unexpected failures are logged with detail but reach the client
only as a generic "operation failed" message.
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from estoque.application.dto.responses import ErrorResponse, FieldIssueResponse
from estoque.config import get_logger, get_settings
from estoque.core.exceptions import (
    ConfigurationError,
    ConflictError,
    EstoqueError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
    ValidationError,
)
from estoque.core.messages import translate

logger = get_logger(__name__)


# Map exceptions to HTTP status codes
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Error codes with a catalog hint of their own
HINTED_CODES = frozenset(
    {
        "ITEM_NOT_FOUND",
        "NOTIFICATION_NOT_FOUND",
        "INSUFFICIENT_STOCK",
        "MOVEMENT_INVALID",
        "ITEM_INVALID",
        "DUPLICATE_ITEM",
        "PREFERENCES_INVALID",
        "IDEMPOTENCY_CONFLICT",
        "STOCK_CHANGED",
        "UNAUTHORIZED",
        "VALIDATION_ERROR",
        "PERSISTENCE_ERROR",
    }
)

# Status codes with a fallback hint
HINTED_STATUSES = frozenset({400, 401, 404, 409, 422, 500})


def _locale() -> str:
    return get_settings().inventory.locale


def _get_hint(error_code: str, status_code: int) -> str:
    """Resolve hint from error code, falling back to status-based hint."""
    if error_code in HINTED_CODES:
        return translate(f"hint_{error_code.lower()}", _locale())
    if status_code in HINTED_STATUSES:
        return translate(f"hint_status_{status_code}", _locale())
    return ""


def _status_for(exc: Exception) -> int:
    for exc_type, code in EXCEPTION_STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def build_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Convert an exception to the standardized JSON error response."""
    status_code = _status_for(exc)
    error_code = exc.code if isinstance(exc, EstoqueError) else "INTERNAL_ERROR"
    request_id = getattr(request.state, "request_id", None)

    if status_code >= 500:
        logger.error(
            "unhandled_exception",
            request_id=request_id,
            path=request.url.path,
            error_type=exc.__class__.__name__,
            error_code=error_code,
            error=str(exc),
            traceback=traceback.format_exc(),
        )
        message = translate("operation_failed", _locale())
    else:
        logger.info(
            "request_rejected",
            request_id=request_id,
            path=request.url.path,
            error_code=error_code,
            status=status_code,
        )
        message = exc.message if isinstance(exc, EstoqueError) else str(exc)

    errors: list[FieldIssueResponse] = []
    if isinstance(exc, ValidationError) and status_code < 500:
        issues = exc.details.get("errors") or [
            {"field": exc.field, "message": exc.message, "code": error_code}
        ]
        errors = [FieldIssueResponse(**issue) for issue in issues]

    error_response = ErrorResponse(
        error_code=error_code,
        message=message,
        hint=_get_hint(error_code, status_code),
        errors=errors,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(mode="json"),
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    Converts exceptions that escaped the route handlers to standardized JSON
    error responses.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            return build_error_response(request, e)


def setup_exception_handlers(app: FastAPI) -> None:
    """Set up FastAPI exception handlers."""
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException

    @app.exception_handler(EstoqueError)
    async def domain_exception_handler(request: Request, exc: EstoqueError) -> JSONResponse:
        """Translate domain errors raised by use cases."""
        return build_error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors."""
        errors = []
        details = []
        for error in exc.errors():
            loc = [str(part) for part in error["loc"] if part not in ("body", "query", "path")]
            field = ".".join(loc) or "body"
            errors.append(FieldIssueResponse(field=field, message=error["msg"], code=error["type"]))
            details.append(f"{field}: {error['msg']}")

        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error_code="VALIDATION_ERROR",
                message=translate("request_invalid", _locale()),
                hint=_get_hint("VALIDATION_ERROR", 422),
                detail="; ".join(details),
                errors=errors,
                path=request.url.path,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        """Handle HTTP exceptions with standardized format."""
        error_code = _infer_error_code(exc.status_code)
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error_code=error_code,
                message=str(exc.detail) if exc.detail else "An error occurred",
                hint=_get_hint(error_code, exc.status_code),
                path=request.url.path,
            ).model_dump(mode="json"),
            headers=getattr(exc, "headers", None),
        )


def _infer_error_code(status_code: int) -> str:
    """Infer a machine-readable error code from an HTTP status."""
    return {
        400: "BAD_REQUEST",
        401: "UNAUTHORIZED",
        404: "NOT_FOUND",
        409: "CONFLICT",
        405: "METHOD_NOT_ALLOWED",
        422: "UNPROCESSABLE_ENTITY",
    }.get(status_code, "HTTP_ERROR")
