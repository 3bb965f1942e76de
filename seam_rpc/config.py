"""
Configuration settings for the RPC client
"""
import os
from dataclasses import dataclass
from typing import Any, Dict

from seam_rpc.telemetry.metrics import setup_metrics
from seam_rpc.telemetry.tracer import setup_tracer

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ClientConfig:
    """Configuration for an HTTP JSON-RPC client"""
    endpoint: str
    timeout_seconds: float = 5.0
    encoder: str = "json"  # json, msgpack

    # Tracing configuration
    enable_tracing: bool = False
    service_name: str = "seam_rpc.client"
    otlp_endpoint: str = "localhost:4317"

    @classmethod
    def from_env(cls, prefix: str = "SEAM_RPC_") -> "ClientConfig":
        """Create config from environment variables

        Reads <prefix>ENDPOINT (required), TIMEOUT, ENCODER, ENABLE_TRACING,
        SERVICE_NAME and OTLP_ENDPOINT.
        """
        endpoint = os.getenv(f"{prefix}ENDPOINT")
        if not endpoint:
            raise ValueError(f"{prefix}ENDPOINT is not set")

        return cls(
            endpoint=endpoint,
            timeout_seconds=float(os.getenv(f"{prefix}TIMEOUT", "5.0")),
            encoder=os.getenv(f"{prefix}ENCODER", "json").lower(),
            enable_tracing=os.getenv(f"{prefix}ENABLE_TRACING", "false").lower() in _TRUE_VALUES,
            service_name=os.getenv(f"{prefix}SERVICE_NAME", "seam_rpc.client"),
            otlp_endpoint=os.getenv(f"{prefix}OTLP_ENDPOINT", "localhost:4317"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "endpoint": self.endpoint,
            "timeout_seconds": self.timeout_seconds,
            "encoder": self.encoder,
            "enable_tracing": self.enable_tracing,
            "service_name": self.service_name,
            "otlp_endpoint": self.otlp_endpoint,
        }


def configure_telemetry(config: ClientConfig, span_exporter=None, metric_readers=None):
    """Set up OpenTelemetry tracing and metrics when the config enables them

    Args:
        config: Client configuration
        span_exporter: Span exporter to use instead of OTLP
        metric_readers: Metric readers to use instead of OTLP

    Returns:
        Tracer or None when tracing is disabled
    """
    if not config.enable_tracing:
        return None

    tracer = setup_tracer(
        config.service_name,
        otlp_endpoint=config.otlp_endpoint,
        exporter=span_exporter,
    )
    setup_metrics(
        config.service_name,
        otlp_endpoint=config.otlp_endpoint,
        readers=metric_readers,
    )
    return tracer
