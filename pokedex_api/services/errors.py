"""Domain exceptions raised by the service layer.

Each exception carries the HTTP status and :class:`ErrorType` it maps to so the
FastAPI exception handler can render it without a lookup table.
"""

from __future__ import annotations

from fastapi import status

from pokedex_api.schemas.error import ErrorType


class PokedexError(Exception):
    """Base class for failures that map onto a client-visible error response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_type: ErrorType = ErrorType.INTERNAL_ERROR

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(PokedexError):
    """Required input is missing or unusable."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_type = ErrorType.VALIDATION_ERROR


class NotFoundError(PokedexError):
    """A referenced creature does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_type = ErrorType.NOT_FOUND


class ConflictError(PokedexError):
    """The write would break creature name uniqueness."""

    status_code = status.HTTP_409_CONFLICT
    error_type = ErrorType.CONFLICT


class PersistenceError(PokedexError):
    """A store write failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_type = ErrorType.DATABASE_ERROR


__all__ = [
    "ConflictError",
    "NotFoundError",
    "PersistenceError",
    "PokedexError",
    "ValidationError",
]
