"""Request context middleware.

Generates or forwards the request ID and correlation ID, binds both to
contextvars for logging, stores them on scope state, and echoes them on
the response. Client-provided values are sanitized (length + character
set) to prevent log injection. Correlation ID falls back to the request ID.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming.
"""

import re
import uuid
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any

from userapi.shared.context import reset_request_context, set_request_context

Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]

# Safe for logging: alphanumeric, hyphen, underscore; max length to avoid abuse.
ID_MAX_LENGTH = 64
ID_ALLOWED_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1," + str(ID_MAX_LENGTH) + r"}$")


def _get_header(scope: Scope, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def sanitize_id(raw: str | None) -> str | None:
    """Return the stripped value if it is safe to log, else None."""
    if raw is None:
        return None
    value = raw.strip()
    return value if ID_ALLOWED_PATTERN.match(value) else None


class RequestContextMiddleware:
    """Add or forward request/correlation IDs on each HTTP request and response."""

    def __init__(
        self,
        app: ASGIApp,
        request_id_header: str = "X-Request-ID",
        correlation_id_header: str = "X-Correlation-ID",
    ) -> None:
        self.app = app
        self.request_id_header = request_id_header
        self.correlation_id_header = correlation_id_header

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        request_id = sanitize_id(_get_header(scope, self.request_id_header)) or str(
            uuid.uuid4()
        )
        correlation_id = (
            sanitize_id(_get_header(scope, self.correlation_id_header)) or request_id
        )
        state = scope.setdefault("state", {})
        state["request_id"] = request_id
        state["correlation_id"] = correlation_id

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((self.request_id_header.lower().encode(), request_id.encode()))
                headers.append(
                    (self.correlation_id_header.lower().encode(), correlation_id.encode())
                )
                message["headers"] = headers
            await send(message)

        tokens = set_request_context(request_id, correlation_id)
        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            reset_request_context(tokens)
