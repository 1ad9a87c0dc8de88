"""Decorator and helpers for tracing service operations."""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

# Only these argument names are copied onto spans; payloads may hold personal data.
_SAFE_SPAN_ATTR_KEYS = frozenset({"user_id", "page", "size", "offset", "limit"})


def _safe_span_attrs(
    signature: inspect.Signature, args: tuple[Any, ...], kwargs: dict[str, Any]
) -> dict[str, str]:
    """Bind positional and keyword arguments by name and keep the allow-listed ones."""
    try:
        bound = signature.bind_partial(*args, **kwargs)
    except TypeError:
        return {}
    return {
        f"arg.{key}": str(value)
        for key, value in bound.arguments.items()
        if key in _SAFE_SPAN_ATTR_KEYS
    }


def _record_failure(span: trace.Span, exc: Exception) -> None:
    span.set_status(Status(StatusCode.ERROR, str(exc)))
    span.record_exception(exc)


def traced(operation_name: str | None = None) -> Callable:
    """Decorator to create a span around a function (sync or async).

    Uses the global tracer provider, so it is a no-op until telemetry
    is configured at startup.

    Args:
        operation_name: Span name (defaults to module.funcname).

    Returns:
        Decorated function.
    """

    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(__name__)
        signature = inspect.signature(func)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                span.set_attributes(_safe_span_attrs(signature, args, kwargs))
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    _record_failure(span, e)
                    raise

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                span.set_attributes(_safe_span_attrs(signature, args, kwargs))
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    _record_failure(span, e)
                    raise

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span and span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)


def get_trace_id() -> str | None:
    """Return the current trace ID as 32-char hex, or None."""
    ctx = trace.get_current_span().get_span_context()
    if ctx.is_valid:
        return format(ctx.trace_id, "032x")
    return None
