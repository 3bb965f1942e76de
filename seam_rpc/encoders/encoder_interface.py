"""
Payload encoder interface

Defines the contract every wire encoding (JSON, MessagePack) implements.
An encoder is bound to a client once, at construction; a client never mixes
encodings between calls.
"""

import abc
from typing import Any


class EncoderInterface(abc.ABC):
    """Encoder interface, stateless and default-constructible"""

    @abc.abstractmethod
    def encode(self, payload: Any) -> bytes:
        """Serialize a payload to wire bytes

        Args:
            payload: Value to serialize

        Returns:
            bytes: Encoded payload

        Raises:
            EncodeError: The payload cannot be represented in this format
        """
        pass

    @abc.abstractmethod
    def decode(self, data: bytes) -> Any:
        """Deserialize wire bytes

        Args:
            data: Raw bytes, possibly malformed or hostile

        Returns:
            Any: Decoded value

        Raises:
            DecodeError: The bytes are malformed
        """
        pass

    @abc.abstractmethod
    def mime(self) -> str:
        """Content type attached to outgoing requests"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
