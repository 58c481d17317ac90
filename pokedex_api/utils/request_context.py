"""Request-scoped identifiers shared by middleware, handlers and logs.

Every inbound request is tagged with an identifier that is echoed in the
``X-Request-ID`` response header and embedded in error payloads so a failing
call can be matched to its log lines.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

__all__ = [
    "REQUEST_ID_CONTEXT",
    "REQUEST_ID_HEADER",
    "clear_request_id",
    "get_request_id",
    "resolve_request_id",
    "set_request_id",
]

REQUEST_ID_HEADER = "X-Request-ID"

# Each request handler runs in its own task, so the ContextVar isolates the
# identifier per request without any module-level mutable state.
REQUEST_ID_CONTEXT: ContextVar[str] = ContextVar("request_id", default="")

_MAX_INCOMING_ID_LENGTH = 128


def resolve_request_id(incoming: str | None) -> str:
    """Reuse a caller-supplied identifier when sane, otherwise mint a UUID4."""

    if incoming:
        candidate = incoming.strip()
        if candidate and len(candidate) <= _MAX_INCOMING_ID_LENGTH and candidate.isprintable():
            return candidate
    return str(uuid.uuid4())


def set_request_id(request_id: str) -> Token[str]:
    """Store ``request_id`` for the active task and return the reset token."""

    return REQUEST_ID_CONTEXT.set(request_id)


def get_request_id() -> str:
    """Return the identifier of the active request (empty outside a request)."""

    return REQUEST_ID_CONTEXT.get()


def clear_request_id(token: Token[str] | None = None) -> None:
    """Reset the identifier, restoring the previous value when ``token`` is given."""

    if token is not None:
        REQUEST_ID_CONTEXT.reset(token)
    else:
        REQUEST_ID_CONTEXT.set("")
