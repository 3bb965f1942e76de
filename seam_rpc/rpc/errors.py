"""
JSON-RPC client error taxonomy

Every failure of a call surfaces as one subclass of Error:

- ProtocolError: the response broke an envelope invariant
- RpcError: the server reported an application error (code + message)
- TransportError: the request could not be sent or the body not received
- HttpError: the server answered with a status other than 200
- OtherError: encoding/decoding failures (EncodeError, DecodeError)
"""

from typing import Any, Dict, Optional

# int16 bounds of the error code field
RPC_ERROR_CODE_MIN = -32768
RPC_ERROR_CODE_MAX = 32767

# Fixed protocol violation reasons
INVALID_VERSION = "invalid JSON RPC version"
INVALID_RESPONSE_ID = "invalid response ID"
NO_RESULT_OR_ERROR = "no result/error fields"


class Error(Exception):
    """Base class for all client errors"""
    kind = "error"


class ProtocolError(Error):
    """Server response violates the JSON-RPC 2.0 envelope"""
    kind = "protocol"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"invalid server response: {self.reason}"


class RpcError(Error):
    """Error object reported by the server

    The meaning of the code belongs to the server, the client only carries it.

    Args:
        code: Error code, signed 16-bit
        message: Optional human readable message
    """
    kind = "rpc"

    def __init__(self, code: int, message: Optional[str] = None):
        super().__init__(code, message)
        self._code = code
        self._message = message

    @property
    def code(self) -> int:
        return self._code

    @property
    def message(self) -> Optional[str]:
        return self._message

    @classmethod
    def from_dict(cls, data: Any) -> "RpcError":
        """Build an RpcError from a decoded error object

        Args:
            data: Decoded "error" member of a response

        Returns:
            RpcError: The error

        Raises:
            DecodeError: The object does not have the error shape
        """
        if not isinstance(data, dict):
            raise DecodeError(f"error object must be a map, got {type(data).__name__}")

        code = data.get("code")
        if isinstance(code, bool) or not isinstance(code, int):
            raise DecodeError(f"error code must be an integer, got {code!r}")
        if not RPC_ERROR_CODE_MIN <= code <= RPC_ERROR_CODE_MAX:
            raise DecodeError(f"error code {code} out of range")

        message = data.get("message")
        if message is not None and not isinstance(message, str):
            raise DecodeError(f"error message must be a string, got {type(message).__name__}")

        return cls(code, message)

    def to_dict(self) -> Dict[str, Any]:
        msg = {"code": self._code}
        if self._message is not None:
            msg["message"] = self._message
        return msg

    def __eq__(self, other):
        if not isinstance(other, RpcError):
            return NotImplemented
        return (self._code, self._message) == (other._code, other._message)

    def __hash__(self):
        return hash((self._code, self._message))

    def __str__(self) -> str:
        return f"{self._code} {self._message or ''}"

    def __repr__(self) -> str:
        return f"RpcError(code={self._code!r}, message={self._message!r})"


class TransportError(Error):
    """The underlying transport failed (connection, timeout, bad request)"""
    kind = "transport"


class HttpError(Error):
    """The server answered with a non-200 status

    Args:
        status_code: HTTP status code
        body: Raw response body text
    """
    kind = "http"

    def __init__(self, status_code: int, body: str):
        super().__init__(status_code, body)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        return f"{self.status_code} {self.body}"


class OtherError(Error):
    """Serialization or internal failure, wraps the underlying cause"""
    kind = "other"

    def __str__(self) -> str:
        if self.args:
            return str(self.args[0])
        if self.__cause__ is not None:
            return str(self.__cause__)
        return ""


class EncodeError(OtherError):
    """Payload cannot be represented in the wire format"""


class DecodeError(OtherError):
    """Bytes are malformed or do not have the expected shape"""
