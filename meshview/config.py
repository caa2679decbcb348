"""
Configuration management using Pydantic Settings.

Environment variables can override all settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IstioSettings(BaseSettings):
    """Service mesh naming settings."""

    model_config = SettingsConfigDict(env_prefix="ISTIO_")

    unknown_service: str = Field(
        default="unknown",
        description="Label value used for traffic from or to outside the mesh.",
    )


class PrometheusSettings(BaseSettings):
    """Request metric label settings."""

    model_config = SettingsConfigDict(env_prefix="PROMETHEUS_")

    source_label: str = Field(default="source_service", description="Caller label name")
    destination_label: str = Field(
        default="destination_service",
        description="Callee label name",
    )
    response_code_label: str = Field(
        default="response_code",
        description="HTTP response code label name",
    )
    error_code_threshold: int = Field(
        default=400,
        description="Lowest response code counted as an error",
    )


class TelemetrySettings(BaseSettings):
    """OpenTelemetry settings."""

    model_config = SettingsConfigDict(env_prefix="OTEL_")

    enabled: bool = Field(default=False, description="Enable OpenTelemetry tracing")
    service_name: str = Field(default="meshview", description="Service name for traces")
    exporter_endpoint: str = Field(
        default="http://otel-collector.observability:4317",
        description="OTLP exporter endpoint",
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format string",
    )

    # Nested settings
    istio: IstioSettings = Field(default_factory=IstioSettings)
    prometheus: PrometheusSettings = Field(default_factory=PrometheusSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
