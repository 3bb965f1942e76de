"""
OpenTelemetry Integration Module

Provides distributed tracing and metrics collection capabilities:
- tracer: span creation and trace context injection into request headers
- metrics: counters and latency histograms
"""

from .tracer import (
    setup_tracer,
    inject_trace_context,
    create_span
)
from .metrics import (
    setup_metrics,
    get_counter,
    get_histogram,
    increment_counter,
    record_latency
)

__all__ = [
    "setup_tracer",
    "inject_trace_context",
    "create_span",
    "setup_metrics",
    "get_counter",
    "get_histogram",
    "increment_counter",
    "record_latency"
]
