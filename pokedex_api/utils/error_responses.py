"""Helper functions for constructing structured API error responses.

Every exception handler in :mod:`pokedex_api.main` funnels through these
builders so that all non-2xx bodies share one shape: a human-readable
``message`` plus the request id, path and a timezone-aware timestamp.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from fastapi.responses import JSONResponse

from pokedex_api.schemas.error import (
    ErrorResponse,
    ErrorType,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from pokedex_api.utils.request_context import get_request_id

__all__ = [
    "build_error_response",
    "build_validation_error_response",
    "error_json_response",
]


def _current_timestamp() -> datetime:
    """Return the current UTC time; patched by tests for deterministic payloads."""

    return datetime.now(UTC)


def build_validation_error_response(
    *,
    errors: Sequence[ValidationErrorDetail],
    message: str,
    detail: str,
    status_code: int,
    path: str,
    error_type: ErrorType = ErrorType.VALIDATION_ERROR,
    request_id: str | None = None,
) -> ValidationErrorResponse:
    """Construct a ``ValidationErrorResponse`` listing each offending field."""

    return ValidationErrorResponse(
        error_type=error_type,
        message=message,
        detail=detail,
        status_code=status_code,
        timestamp=_current_timestamp(),
        request_id=request_id or get_request_id(),
        path=path,
        errors=list(errors),
    )


def build_error_response(
    *,
    error_type: ErrorType,
    message: str,
    status_code: int,
    path: str,
    detail: str | None = None,
    retry_after: int | None = None,
    request_id: str | None = None,
) -> ErrorResponse:
    """Construct a generic ``ErrorResponse`` enriched with request metadata."""

    return ErrorResponse(
        error_type=error_type,
        message=message,
        detail=detail,
        status_code=status_code,
        timestamp=_current_timestamp(),
        request_id=request_id or get_request_id(),
        path=path,
        retry_after=retry_after,
    )


def error_json_response(payload: ErrorResponse) -> JSONResponse:
    """Serialize ``payload`` into a ``JSONResponse`` carrying its status code."""

    return JSONResponse(
        status_code=payload.status_code,
        content=payload.model_dump(mode="json"),
    )
