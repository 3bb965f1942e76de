"""
Wire Encoders

Payload encodings a client can be bound to:
- json: application/json (default)
- msgpack: application/msgpack
"""

from .encoder_interface import EncoderInterface
from .json_encoder import MIME_JSON, JsonEncoder
from .msgpack_encoder import MIME_MSGPACK, MsgPackEncoder

__all__ = [
    "EncoderInterface",
    "JsonEncoder",
    "MsgPackEncoder",
    "MIME_JSON",
    "MIME_MSGPACK",
]
