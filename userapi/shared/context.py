"""Request context management using contextvars.

Provides async-safe storage for request-scoped identifiers (request ID,
correlation ID). Set by RequestContextMiddleware; read by the logging
filter so every log line carries the current request's IDs.
"""

from contextvars import ContextVar, Token
from dataclasses import dataclass

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


@dataclass(frozen=True)
class RequestContextTokens:
    """Tokens returned by set_request_context; pass to reset_request_context."""

    request_id: Token
    correlation_id: Token


def set_request_context(request_id: str, correlation_id: str) -> RequestContextTokens:
    """Bind IDs to the current task. Call once per request."""
    return RequestContextTokens(
        request_id=_request_id.set(request_id),
        correlation_id=_correlation_id.set(correlation_id),
    )


def reset_request_context(tokens: RequestContextTokens) -> None:
    """Restore the values that were current before set_request_context."""
    _request_id.reset(tokens.request_id)
    _correlation_id.reset(tokens.correlation_id)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _request_id.get()


def get_correlation_id() -> str | None:
    """Return the current correlation ID, or None outside a request."""
    return _correlation_id.get()
