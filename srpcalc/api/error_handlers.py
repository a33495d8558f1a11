"""Error Handlers — map calculator and request validation failures to the error envelope.

Invariants:
    - CalculatorError → exc.to_response() with exc.http_status (InvalidArgumentError carries `field`)
    - Request validation failures are reported in calculator terms: field names are
      the payload field ("x", not "body.x"); a non-integer operand or result is
      INVALID_ARGUMENT with the same wording the core uses; an unknown operation is
      UNKNOWN_OPERATION; anything else is VALIDATION_ERROR
    - Unhandled exceptions → 500 INTERNAL_ERROR, never leaking internal details
    - Log records carry the URL under `request_path`; `path` is reserved for result files

Design Decisions:
    - Validation responses mirror InvalidArgumentError so clients see one error shape
      whether a bad operand is caught by pydantic or by IntegerArithmetic
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from srpcalc.core.errors import CalculatorError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)

_REQUEST_SECTIONS = ("body", "query")
_OPERAND_FIELDS = ("x", "y")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(CalculatorError)
    async def calculator_error_handler(request: Request, exc: CalculatorError):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"CalculatorError: {exc.message}",
            extra={"error_code": exc.code, "request_path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        content = build_validation_response(exc.errors())
        logger.warning(
            f"Invalid request: {content['error']['message']}",
            extra={
                "error_code": content["error"]["code"],
                "request_path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=content,
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "request_path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(
                "INTERNAL_ERROR", "An unexpected error occurred",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **fields: Any,
) -> dict:
    error = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    error.update(fields)
    return {"error": error}


def request_field(loc: tuple) -> str:
    """("body", "x") → "x"; ("query", "path") → "path"."""
    if not loc:
        return "request"
    parts = [str(p) for p in loc if p not in _REQUEST_SECTIONS]
    return ".".join(parts) or str(loc[0])


def describe_validation_error(error: dict) -> dict:
    """Translate one pydantic error into code, field and a calculator message."""
    field = request_field(tuple(error.get("loc", ())))
    kind = error["type"]
    got = type(error.get("input")).__name__

    if field == "operation" and kind == "enum":
        code, message = "UNKNOWN_OPERATION", f"Unknown operation '{error.get('input')}'"
    elif field in _OPERAND_FIELDS and kind != "missing":
        code, message = "INVALID_ARGUMENT", f"Operand '{field}' must be an integer, got {got}"
    elif field == "result" and kind != "missing":
        code, message = "INVALID_ARGUMENT", f"Result must be an integer, got {got}"
    else:
        code, message = "VALIDATION_ERROR", error["msg"]
    return {"code": code, "field": field, "message": message, "type": kind}


def build_validation_response(errors: list[dict]) -> dict:
    """Envelope for a failed request; the first error sets code, message and field."""
    details = [describe_validation_error(e) for e in errors]
    first = details[0] if details else {
        "code": "VALIDATION_ERROR", "field": "request", "message": "Invalid request data",
    }
    return _envelope(
        first["code"], first["message"],
        ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
        field=first["field"], details=details,
    )
