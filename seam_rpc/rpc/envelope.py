"""
JSON-RPC 2.0 envelopes

Request and Response wire shapes. Shape checks live here, envelope
invariants (version, id, result/error coverage) are checked by the client.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from seam_rpc.rpc.errors import DecodeError, RpcError

JSONRPC_VERSION = "2.0"

_MISSING = object()


@dataclass
class Request:
    """Outgoing request envelope, built once per call"""
    id: int
    method: str
    params: Any = field(default_factory=dict)
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> Dict[str, Any]:
        # Wire order: jsonrpc, id, method, params
        return {
            "jsonrpc": self.jsonrpc,
            "id": self.id,
            "method": self.method,
            "params": self.params,
        }


@dataclass
class Response:
    """Incoming response envelope

    Both result and error are optional here; a null result or error counts
    as absent.
    """
    jsonrpc: str
    id: int
    result: Any = None
    error: Optional[RpcError] = None
    has_result: bool = False

    @classmethod
    def from_dict(cls, msg: Any) -> "Response":
        """Build a Response from a decoded message

        Args:
            msg: Value produced by the encoder

        Returns:
            Response: The envelope

        Raises:
            DecodeError: The message does not have the response shape
        """
        if not isinstance(msg, dict):
            raise DecodeError(f"response must be a map, got {type(msg).__name__}")

        jsonrpc = msg.get("jsonrpc", _MISSING)
        if jsonrpc is _MISSING:
            raise DecodeError("missing field `jsonrpc`")
        if not isinstance(jsonrpc, str):
            raise DecodeError(f"`jsonrpc` must be a string, got {type(jsonrpc).__name__}")

        response_id = msg.get("id", _MISSING)
        if response_id is _MISSING:
            raise DecodeError("missing field `id`")
        if isinstance(response_id, bool) or not isinstance(response_id, int) or response_id < 0:
            raise DecodeError(f"`id` must be an unsigned integer, got {response_id!r}")

        error = msg.get("error")
        if error is not None:
            error = RpcError.from_dict(error)

        # null result is treated as missing
        result = msg.get("result")
        has_result = result is not None

        return cls(
            jsonrpc=jsonrpc,
            id=response_id,
            result=result,
            error=error,
            has_result=has_result,
        )
