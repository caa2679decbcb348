"""Logging and OpenTelemetry instrumentation."""

from .setup import configure, setup_logging, setup_telemetry
from .tracing import get_tracer, traced

__all__ = ["configure", "setup_logging", "setup_telemetry", "traced", "get_tracer"]
