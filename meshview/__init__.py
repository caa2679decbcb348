"""
meshview

Service views built from cluster state, mesh configuration and request metrics.

meshview installs no logging handlers or tracer provider on import. An
application calls ``meshview.telemetry.configure()`` once at start-up to apply
the ``APP_`` logging settings and, when ``OTEL_ENABLED`` is set, to export
spans over OTLP.
"""

__version__ = "0.1.0"
