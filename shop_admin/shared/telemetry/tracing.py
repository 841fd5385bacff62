"""Decorator and helpers for distributed tracing."""

import asyncio
from collections.abc import Callable
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

# Only these kwarg names are recorded as span attributes; anything else
# (emails, free-text prefixes, request bodies) is skipped to avoid leaking PII.
_SAFE_SPAN_ATTR_KEYS = frozenset({
    "id", "ids", "user_id", "count", "limit", "offset", "page", "per_page",
    "shape", "mode",
})


def _set_safe_span_attrs(span: trace.Span, kwargs: dict) -> None:
    """Set span attributes from kwargs; only allowlisted keys are recorded."""
    for key, value in kwargs.items():
        if not key.startswith("_") and key.lower() in _SAFE_SPAN_ATTR_KEYS:
            span.set_attribute(f"arg.{key}", str(value))


def traced(
    operation_name: str | None = None,
    attributes: dict | None = None,
) -> Callable:
    """Decorator to create a span for a function (sync or async).

    Args:
        operation_name: Span name (defaults to module.funcname).
        attributes: Optional dict of attributes to set on the span.

    Returns:
        Decorated function.
    """

    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        def _start(span: trace.Span, kwargs: dict[str, Any]) -> None:
            for key, value in (attributes or {}).items():
                span.set_attribute(key, value)
            _set_safe_span_attrs(span, kwargs)

        def _fail(span: trace.Span, exc: Exception) -> None:
            span.set_status(Status(StatusCode.ERROR, str(exc)))
            span.record_exception(exc)

        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                _start(span, kwargs)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _fail(span, e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                _start(span, kwargs)
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    _fail(span, e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span and span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)
