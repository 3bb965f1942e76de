"""
JSON-RPC 2.0 Implementation Module

Provides the client side of JSON-RPC 2.0:
- errors: error taxonomy
- envelope: request/response wire shapes
- client: HTTP client with blocking and asyncio calls
- stubs: typed client stubs generated from method signatures
- client_factory: client creation from configuration
"""

from .errors import (
    Error,
    ProtocolError,
    RpcError,
    TransportError,
    HttpError,
    OtherError,
    EncodeError,
    DecodeError,
)
from .envelope import JSONRPC_VERSION, Request, Response
from .client_interface import RpcInterface
from .client import HttpClient
from .stubs import rpc_client, rpc_method
from .client_factory import ClientFactory, EncoderType, http_client

__all__ = [
    "Error",
    "ProtocolError",
    "RpcError",
    "TransportError",
    "HttpError",
    "OtherError",
    "EncodeError",
    "DecodeError",
    "JSONRPC_VERSION",
    "Request",
    "Response",
    "RpcInterface",
    "HttpClient",
    "rpc_client",
    "rpc_method",
    "ClientFactory",
    "EncoderType",
    "http_client",
]
