"""
seam_rpc - JSON-RPC 2.0 client over HTTP

Turns a method name and parameters into a correlated request/response
exchange:

1. Envelope: JSON-RPC 2.0 requests with per-client monotonically increasing ids
2. Encoders: application/json (default) and application/msgpack
3. Transport: httpx, blocking and asyncio
4. Errors: ProtocolError, RpcError, TransportError, HttpError, OtherError

Every call runs inside an OpenTelemetry span and reports client metrics.
"""

__version__ = "0.1.0"

from seam_rpc.rpc.errors import (
    Error,
    ProtocolError,
    RpcError,
    TransportError,
    HttpError,
    OtherError,
    EncodeError,
    DecodeError,
)
from seam_rpc.encoders import EncoderInterface, JsonEncoder, MsgPackEncoder
from seam_rpc.transport import TransportInterface, HttpxTransport
from seam_rpc.rpc import (
    HttpClient,
    RpcInterface,
    ClientFactory,
    EncoderType,
    http_client,
    rpc_client,
    rpc_method,
)
from seam_rpc.config import ClientConfig, configure_telemetry

__all__ = [
    "Error",
    "ProtocolError",
    "RpcError",
    "TransportError",
    "HttpError",
    "OtherError",
    "EncodeError",
    "DecodeError",
    "EncoderInterface",
    "JsonEncoder",
    "MsgPackEncoder",
    "TransportInterface",
    "HttpxTransport",
    "HttpClient",
    "RpcInterface",
    "ClientFactory",
    "EncoderType",
    "http_client",
    "rpc_client",
    "rpc_method",
    "ClientConfig",
    "configure_telemetry",
]
