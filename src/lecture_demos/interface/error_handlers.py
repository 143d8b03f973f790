"""Global exception handlers — translate domain errors to HTTP responses.

* ``ValidationError`` → 400 ``{errorMessage, errorNumber, propertyName}``
* ``NotFoundError`` → 404 with an empty body
* ``UpstreamModelError`` → 500 ``{"status": "error", "message": "..."}``
* ``SimulatedInternalError`` and anything unhandled → 500 carrying only a
  correlation id; the full detail goes to the server log under that id.
"""

from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lecture_demos.domain.exceptions import (
    ErrorNumber,
    NotFoundError,
    SimulatedInternalError,
    UpstreamModelError,
    ValidationError,
)
from lecture_demos.interface.schemas import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

_INTERNAL_ERROR_MESSAGE = (
    "We are sorry experiencing technical difficulties at this time! "
    "Provide this number to tech support {correlation_id}"
)


def _error_json(status_code: int, message: str, correlation_id: str | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, correlation_id=correlation_id)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def _validation_json(message: str, error_number: int, property_name: str) -> JSONResponse:
    body = ValidationErrorResponse(
        error_message=message, error_number=error_number, property_name=property_name
    )
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


def _property_name(err: dict) -> str:
    """Name the offending field; malformed JSON reports a character offset instead."""
    if err.get("type") == "json_invalid":
        return "body"
    names = [p for p in err.get("loc", ()) if isinstance(p, str)]
    return names[-1] if names else "body"


def _internal_error(exc: Exception) -> JSONResponse:
    correlation_id = str(uuid.uuid4())
    logger.critical("The causality ID is %s", correlation_id, exc_info=exc)
    return _error_json(
        500,
        _INTERNAL_ERROR_MESSAGE.format(correlation_id=correlation_id),
        correlation_id=correlation_id,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(ValidationError)
    async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return _validation_json(exc.message, int(exc.error_number), exc.property_name)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
        logger.debug("%s", exc)
        return Response(status_code=404)

    @app.exception_handler(UpstreamModelError)
    async def upstream_handler(request: Request, exc: UpstreamModelError) -> JSONResponse:
        logger.error("%s: %s", type(exc).__name__, exc)
        return _error_json(500, str(exc))

    @app.exception_handler(SimulatedInternalError)
    async def simulated_handler(request: Request, exc: SimulatedInternalError) -> JSONResponse:
        return _internal_error(exc)

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        messages = []
        for err in errors:
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        property_name = _property_name(errors[0]) if errors else "body"
        return _validation_json("; ".join(messages), int(ErrorNumber.INVALID_FORMAT), property_name)

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        return _internal_error(exc)
