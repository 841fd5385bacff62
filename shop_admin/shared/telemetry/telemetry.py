"""OpenTelemetry tracing for the admin API.

Spans cover incoming requests (FastAPI), SQL statements (SQLAlchemy) and the
service-level ``@traced`` operations; log records carry the active trace id.
Export goes to the console in development or to an OTLP gRPC collector.
"""

import logging
from collections.abc import Callable

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

from shop_admin.core.config import Settings

logger = logging.getLogger(__name__)

# Health checks are not traced.
EXCLUDED_URLS = "/api/v1/health"


class TelemetryConfig:
    """Tracer provider plus the instrumentations the admin API turns on.

    Build with from_settings(), call setup_telemetry() once at startup, then
    instrument_app(); shutdown() flushes pending spans.
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.exporter_type = exporter_type
        self.otlp_endpoint = otlp_endpoint
        self.sample_rate = sample_rate
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelemetryConfig":
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=settings.telemetry_enabled,
            environment=settings.telemetry_environment,
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )

    def _exporter(self) -> SpanExporter | None:
        """Exporter for exporter_type; None for "none" (spans are created, not shipped)."""
        if self.exporter_type == "none":
            return None
        if self.exporter_type == "otlp" and self.otlp_endpoint:
            return OTLPSpanExporter(
                endpoint=self.otlp_endpoint,
                insecure=self.otlp_endpoint.startswith("http://"),
            )
        if self.exporter_type != "console":
            logger.warning(
                "Telemetry exporter %r unusable (otlp needs TELEMETRY_OTLP_ENDPOINT); "
                "using console",
                self.exporter_type,
            )
        return ConsoleSpanExporter()

    def setup_telemetry(self) -> TracerProvider | None:
        """Create the tracer provider and install it globally.

        Returns:
            TracerProvider, or None when disabled or setup failed (the API
            keeps serving without traces).
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=TraceIdRatioBased(self.sample_rate),
            )
            exporter = self._exporter()
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s, exporter=%s, sample_rate=%s",
            self.service_name,
            self.exporter_type,
            self.sample_rate,
        )
        return provider

    def _instrument(self, what: str, instrument: Callable[[TracerProvider], None]) -> None:
        if not self.enabled or self.tracer_provider is None:
            return
        try:
            instrument(self.tracer_provider)
        except Exception as e:
            logger.exception("Failed to instrument %s: %s", what, e)
        else:
            logger.info("%s instrumentation enabled", what)

    def instrument_app(self, app: FastAPI, engine: AsyncEngine | None = None) -> None:
        """Instrument request handling, log records and, when configured, SQL."""
        self._instrument(
            "FastAPI",
            lambda provider: FastAPIInstrumentor.instrument_app(
                app, tracer_provider=provider, excluded_urls=EXCLUDED_URLS
            ),
        )
        self._instrument(
            "Logging",
            lambda provider: LoggingInstrumentor().instrument(
                tracer_provider=provider, set_logging_format=True
            ),
        )
        if engine is not None:
            self._instrument(
                "SQLAlchemy",
                lambda provider: SQLAlchemyInstrumentor().instrument(
                    engine=engine.sync_engine, tracer_provider=provider
                ),
            )

    def shutdown(self) -> None:
        """Flush remaining spans and stop the provider."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception as e:
            logger.exception("Error during telemetry shutdown: %s", e)
        self.tracer_provider = None


_telemetry: TelemetryConfig | None = None


def get_telemetry() -> TelemetryConfig | None:
    """Return the telemetry installed at startup, if any."""
    return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Install (or, with None, clear) the process-wide telemetry."""
    global _telemetry
    _telemetry = telemetry
