"""Tracing helpers for the service view facade."""

import functools
from typing import Any, Callable, Optional

from opentelemetry import trace

TRACER_NAME = "meshview"


def get_tracer() -> trace.Tracer:
    """Return the meshview tracer from the current global provider."""
    return trace.get_tracer(TRACER_NAME)


def traced(
    name: Optional[str] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Callable:
    """
    Run the decorated function inside a span.

    The span is named ``name`` or after the function, and carries the
    function's qualified name plus any ``attributes``. An exception escaping
    the function is recorded on the span, marks it as an error and is
    re-raised unchanged.

    Example:
        @traced("get_service_list")
        def get_service_list(self, namespace, service_list):
            ...
    """

    def decorator(func: Callable) -> Callable:
        span_name = name or func.__name__
        span_attributes = {
            "code.function": func.__qualname__,
            "code.namespace": func.__module__,
            **(attributes or {}),
        }

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with get_tracer().start_as_current_span(
                span_name,
                attributes=span_attributes,
                record_exception=True,
                set_status_on_exception=True,
            ):
                return func(*args, **kwargs)

        return wrapper

    return decorator
