# realiser/shared/observability.py
from typing import Optional

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from realiser.shared.config import Settings, settings as default_settings


def setup_tracing(settings: Optional[Settings] = None) -> TracerProvider:
    """
    Configures the global OpenTelemetry tracer provider.

    Spans are only exported (to the console) when OTEL_CONSOLE_EXPORT is
    set; otherwise they exist to give log lines a trace id.
    """
    settings = settings or default_settings
    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "service.environment": settings.APP_ENV.value,
    })
    provider = TracerProvider(resource=resource)
    if settings.OTEL_CONSOLE_EXPORT:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    return provider


def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in use cases.
    """
    return trace.get_tracer(name)
