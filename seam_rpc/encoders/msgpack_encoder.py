"""
MessagePack encoder

Opt-in compact binary encoding with the same semantics as JSON: maps are
written with string keys, strings decode to str.
"""

from typing import Any

import msgpack

from seam_rpc.encoders.encoder_interface import EncoderInterface
from seam_rpc.rpc.errors import DecodeError, EncodeError

MIME_MSGPACK = "application/msgpack"


class MsgPackEncoder(EncoderInterface):
    """application/msgpack encoder"""

    def encode(self, payload: Any) -> bytes:
        try:
            return msgpack.packb(payload, use_bin_type=True)
        except (TypeError, ValueError, OverflowError, RecursionError) as e:
            raise EncodeError(str(e)) from e

    def decode(self, data: bytes) -> Any:
        try:
            return msgpack.unpackb(data, raw=False)
        except (msgpack.UnpackException, ValueError, TypeError, RecursionError) as e:
            raise DecodeError(str(e) or type(e).__name__) from e

    def mime(self) -> str:
        return MIME_MSGPACK
