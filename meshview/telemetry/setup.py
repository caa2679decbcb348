"""Logging and OpenTelemetry setup."""

import logging
from typing import Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from .. import __version__
from ..config import Settings, get_settings

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format,
    )


def setup_telemetry(settings: Settings) -> Optional[TracerProvider]:
    """
    Configure OpenTelemetry tracing.

    Sets up:
    - OTLP exporter to send traces to the collector
    - Custom resource attributes

    Returns the installed provider, or None when tracing is disabled.
    """
    if not settings.telemetry.enabled:
        logger.info("OpenTelemetry disabled")
        return None

    resource = Resource.create({
        "service.name": settings.telemetry.service_name,
        "service.version": __version__,
    })

    provider = TracerProvider(resource=resource)

    try:
        otlp_exporter = OTLPSpanExporter(
            endpoint=settings.telemetry.exporter_endpoint,
            insecure=True,
        )
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
        logger.info(
            "OpenTelemetry configured: exporting to %s",
            settings.telemetry.exporter_endpoint,
        )
    except Exception as e:
        logger.warning(f"Failed to configure OTLP exporter: {e}")

    # Still set provider for local tracing
    trace.set_tracer_provider(provider)
    return provider


def configure(settings: Optional[Settings] = None) -> Optional[TracerProvider]:
    """
    Apply logging and tracing settings for an application embedding meshview.

    Call once at start-up, before the first ``ServiceViewService`` call.
    Without ``settings`` the environment-driven ``get_settings()`` is used.
    Returns the tracer provider installed by ``setup_telemetry``, if any.
    """
    settings = settings or get_settings()
    setup_logging(settings)
    return setup_telemetry(settings)
