"""
Transport Module

Carries encoded requests to the endpoint:
- transport_interface: contract the RPC client depends on
- httpx_transport: HTTP transport built on httpx
"""

from .transport_interface import TransportInterface
from .httpx_transport import HttpxTransport

__all__ = ["TransportInterface", "HttpxTransport"]
