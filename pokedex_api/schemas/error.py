"""Error response schemas for consistent error handling."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ErrorType(str, Enum):
    """Types of errors that can occur."""

    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    DATABASE_ERROR = "database_error"
    INTERNAL_ERROR = "internal_error"
    TIMEOUT_ERROR = "timeout_error"


class ErrorResponse(BaseModel):
    """Standardized error response model."""

    error_type: ErrorType = Field(..., description="Category of error")
    message: str = Field(..., description="Human-readable error message")
    detail: str | None = Field(None, description="Additional error details or context")
    status_code: int = Field(..., description="HTTP status code")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When error occurred"
    )
    request_id: str | None = Field(None, description="Unique request identifier for tracking")
    path: str | None = Field(None, description="Request path that caused the error")
    retry_after: int | None = Field(
        None, description="Seconds to wait before retrying (for timeout errors)"
    )

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "error_type": "conflict",
                "message": "A Pokémon with this name already exists.",
                "detail": "name='Pikachu'",
                "status_code": 409,
                "timestamp": "2025-11-03T10:30:00Z",
                "request_id": "8c0d2f7e-4c59-4b43-9a43-6d2f1f0b1f55",
                "path": "/pokemon",
                "retry_after": None,
            }
        }


class ValidationErrorDetail(BaseModel):
    """Details for validation errors."""

    field: str = Field(..., description="Field that failed validation")
    message: str = Field(..., description="Validation error message")
    value: Any = Field(None, description="Value that failed validation")


class ValidationErrorResponse(ErrorResponse):
    """Extended error response for validation errors."""

    error_type: ErrorType = Field(default=ErrorType.VALIDATION_ERROR)
    errors: list[ValidationErrorDetail] = Field(
        default_factory=list, description="List of validation errors"
    )

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "error_type": "validation_error",
                "message": "Request validation failed",
                "detail": "1 validation error(s)",
                "status_code": 400,
                "timestamp": "2025-11-03T10:30:00Z",
                "request_id": "8c0d2f7e-4c59-4b43-9a43-6d2f1f0b1f55",
                "path": "/pokemon",
                "errors": [
                    {"field": "body.attack", "message": "Field required", "value": None},
                ],
            }
        }
