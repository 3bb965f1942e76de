"""
OpenTelemetry Trace Context Management

Provides tracer setup, span creation and trace context injection into
outgoing HTTP headers so server-side spans join the caller's trace.
"""

import logging
from typing import Any, Dict, MutableMapping, Optional

from opentelemetry import propagate, trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter
from opentelemetry.sdk.trace.sampling import ALWAYS_ON

logger = logging.getLogger(__name__)


def setup_tracer(service_name: str,
                 otlp_endpoint: str = "localhost:4317",
                 exporter: Optional[SpanExporter] = None):
    """Configure OpenTelemetry tracer

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
        exporter: Span exporter to use instead of OTLP

    Returns:
        Tracer: Tracer for the service
    """
    # Create TracerProvider
    provider = TracerProvider(
        sampler=ALWAYS_ON,
        resource=Resource.create({"service.name": service_name}),
    )

    if exporter is None:
        exporter = OTLPSpanExporter(endpoint=otlp_endpoint)

    provider.add_span_processor(BatchSpanProcessor(exporter))

    # Set global TracerProvider
    trace.set_tracer_provider(provider)

    tracer = trace.get_tracer(service_name)

    logger.info(f"OpenTelemetry trace configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return tracer


def inject_trace_context(headers: MutableMapping[str, str]) -> MutableMapping[str, str]:
    """Inject the active trace context into outgoing headers

    Adds W3C traceparent/tracestate (and baggage) when a span is active,
    leaves the headers untouched otherwise.

    Args:
        headers: Header mapping, modified in place

    Returns:
        The same mapping
    """
    propagate.inject(headers)
    return headers


def create_span(name: str, attributes: Dict[str, Any] = None):
    """Create new span

    Args:
        name: Span name
        attributes: Span attributes

    Returns:
        Context manager of the span, current while the block runs
    """
    tracer = trace.get_tracer(__name__)
    return tracer.start_as_current_span(
        name,
        attributes=attributes or {},
        kind=trace.SpanKind.CLIENT,
    )
