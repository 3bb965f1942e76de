"""
Client factory

Creates encoders and clients from a name or a configuration, so the wire
encoding can be chosen by configuration instead of code.
"""

from typing import TYPE_CHECKING, Any, Dict, Union

from seam_rpc.encoders.encoder_interface import EncoderInterface
from seam_rpc.encoders.json_encoder import JsonEncoder
from seam_rpc.encoders.msgpack_encoder import MsgPackEncoder
from seam_rpc.rpc.client import DEFAULT_TIMEOUT, HttpClient
from seam_rpc.transport.transport_interface import TransportInterface

if TYPE_CHECKING:
    from seam_rpc.config import ClientConfig


class EncoderType:
    """Encoder type constants"""
    JSON = "json"
    MSGPACK = "msgpack"


_ENCODERS = {
    EncoderType.JSON: JsonEncoder,
    EncoderType.MSGPACK: MsgPackEncoder,
}


class ClientFactory:
    """Factory for encoders and HTTP clients"""

    @staticmethod
    def create_encoder(encoder_type: str = EncoderType.JSON) -> EncoderInterface:
        """Create an encoder

        Args:
            encoder_type: Encoder type, "json" or "msgpack"

        Returns:
            EncoderInterface: New encoder instance

        Raises:
            ValueError: Unknown encoder type
        """
        encoder_cls = _ENCODERS.get(encoder_type.lower())
        if encoder_cls is None:
            raise ValueError(f"Invalid encoder type: {encoder_type}")
        return encoder_cls()

    @staticmethod
    def create_client(config: Union["ClientConfig", Dict[str, Any]],
                      transport: TransportInterface = None) -> HttpClient:
        """Create a client from configuration

        Args:
            config: ClientConfig or dict with the same keys ("endpoint" required)
            transport: Transport to use instead of the default httpx one

        Returns:
            HttpClient: Configured client

        Raises:
            ValueError: Missing endpoint or invalid encoder type
        """
        if isinstance(config, dict):
            endpoint = config.get("endpoint")
            encoder_type = config.get("encoder", EncoderType.JSON)
            timeout = config.get("timeout_seconds", DEFAULT_TIMEOUT)
        else:
            endpoint = config.endpoint
            encoder_type = config.encoder
            timeout = config.timeout_seconds

        if not endpoint:
            raise ValueError("endpoint is required")

        encoder = ClientFactory.create_encoder(encoder_type)
        return HttpClient(endpoint, encoder=encoder, transport=transport).timeout(timeout)


def http_client(url: str) -> HttpClient:
    """Create a JSON client for url with default settings"""
    return HttpClient(url, encoder=JsonEncoder())
