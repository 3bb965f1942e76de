"""
OpenTelemetry Metrics Collection

Counters and histograms used by the RPC client. Until a MeterProvider is
configured the instruments are no-ops.
"""

import logging
from typing import Any, Dict, List, Optional

from opentelemetry import metrics
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import MetricReader, PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource

logger = logging.getLogger(__name__)

# Global metric counters and histograms dictionary
_counters = {}
_histograms = {}


def setup_metrics(service_name: str,
                  otlp_endpoint: str = "localhost:4317",
                  export_interval_ms: int = 5000,
                  readers: Optional[List[MetricReader]] = None):
    """Configure OpenTelemetry metrics collection

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
        export_interval_ms: Metrics export interval in milliseconds
        readers: Metric readers to use instead of the OTLP exporter

    Returns:
        Meter: Meter for the service
    """
    if readers is None:
        otlp_exporter = OTLPMetricExporter(endpoint=otlp_endpoint)
        readers = [
            PeriodicExportingMetricReader(
                otlp_exporter,
                export_interval_millis=export_interval_ms
            )
        ]

    provider = MeterProvider(
        metric_readers=readers,
        resource=Resource.create({"service.name": service_name}),
    )

    # Set global MeterProvider
    metrics.set_meter_provider(provider)

    meter = metrics.get_meter(service_name)

    logger.info(f"OpenTelemetry metrics configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return meter


def get_counter(name: str, description: str, unit: str = "1"):
    """Get or create counter

    Args:
        name: Counter name
        description: Counter description
        unit: Counter unit (default "1", representing count)

    Returns:
        Counter: Counter object
    """
    if name not in _counters:
        meter = metrics.get_meter(__name__)
        _counters[name] = meter.create_counter(
            name=name,
            description=description,
            unit=unit
        )

    return _counters[name]


def get_histogram(name: str, description: str, unit: str = "ms"):
    """Get or create histogram

    Args:
        name: Histogram name
        description: Histogram description
        unit: Histogram unit (default "ms", representing milliseconds)

    Returns:
        Histogram: Histogram object
    """
    if name not in _histograms:
        meter = metrics.get_meter(__name__)
        _histograms[name] = meter.create_histogram(
            name=name,
            description=description,
            unit=unit
        )

    return _histograms[name]


def increment_counter(name: str, amount: int = 1, attributes: Dict[str, Any] = None):
    """Increment counter value"""
    counter = get_counter(name, f"Counter for {name}")
    counter.add(amount, attributes or {})


def record_latency(name: str, value_ms: float, attributes: Dict[str, Any] = None):
    """Record latency histogram"""
    histogram = get_histogram(name, f"Latency histogram for {name}")
    histogram.record(value_ms, attributes or {})
