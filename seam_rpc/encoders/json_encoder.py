"""
JSON encoder

Default textual encoding. Output is compact and keeps key insertion order so
a request renders as {"jsonrpc":"2.0","id":0,"method":"...","params":...}.
"""

import json
from typing import Any

from seam_rpc.encoders.encoder_interface import EncoderInterface
from seam_rpc.rpc.errors import DecodeError, EncodeError

MIME_JSON = "application/json"


class JsonEncoder(EncoderInterface):
    """application/json encoder"""

    def encode(self, payload: Any) -> bytes:
        try:
            # NaN and Infinity are not JSON
            text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodeError(str(e)) from e
        return text.encode("utf-8")

    def decode(self, data: bytes) -> Any:
        try:
            return json.loads(data)
        except (ValueError, TypeError, RecursionError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            raise DecodeError(str(e)) from e

    def mime(self) -> str:
        return MIME_JSON
