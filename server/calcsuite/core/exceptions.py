from __future__ import annotations

import logging
import math
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calcsuite.core.context import get_request_id

logger = logging.getLogger("calcsuite.errors")


class AppError(Exception):
    status_code: int = 500
    error_type: str = "APP_ERROR"

    def __init__(self, message: str, *, received: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.received = received


class InvalidInputError(AppError):
    status_code = 400
    error_type = "INVALID_INPUT"


class InvalidUnitError(AppError):
    status_code = 400
    error_type = "INVALID_UNIT"


class InvalidShapeError(AppError):
    status_code = 400
    error_type = "INVALID_SHAPE"


class InvalidTypeError(AppError):
    status_code = 400
    error_type = "INVALID_TYPE"


class InvalidOperatorError(AppError):
    status_code = 400
    error_type = "INVALID_OPERATOR"


class InvalidDateError(AppError):
    status_code = 400
    error_type = "INVALID_DATE"


class InvalidExpressionError(AppError):
    status_code = 400
    error_type = "INVALID_EXPRESSION"


class NotFoundError(AppError):
    status_code = 404
    error_type = "NOT_FOUND"


def _finite_echo(value: Any) -> Any:
    """Replace NaN and infinities with their repr so the echo stays valid JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    if isinstance(value, dict):
        return {key: _finite_echo(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_finite_echo(item) for item in value]
    return value


def error_payload(message: str, error_type: str, received: Any = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"error": message, "type": error_type}
    if received is not None:
        payload["received"] = _finite_echo(jsonable_encoder(received))
    trace_id = get_request_id()
    if trace_id:
        payload["traceId"] = trace_id
    return payload


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    if location:
        return f"{location}: {message}"
    return message


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        logger.info("request.rejected", extra={"error_type": exc.error_type, "reason": exc.message})
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(exc.message, exc.error_type, exc.received),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.info("request.invalid", extra={"error_type": InvalidInputError.error_type, "reason": message})
        return JSONResponse(
            status_code=InvalidInputError.status_code,
            content=error_payload(message, InvalidInputError.error_type, exc.body),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(str(exc.detail), "HTTP_ERROR"),
            headers=getattr(exc, "headers", None),
        )
