"""
Transport interface

The client needs only four things from its transport: build a POST request,
send it, read the response body to completion, and release resources. Each
step that touches the network has a blocking and a coroutine form.
"""

import abc
from typing import Mapping

import httpx

from seam_rpc.rpc.errors import TransportError


class TransportInterface(abc.ABC):
    """Transport interface the RPC client is written against"""

    def build_request(self,
                      url: str,
                      content: bytes,
                      headers: Mapping[str, str],
                      timeout: float) -> httpx.Request:
        """Build an outbound POST request

        Args:
            url: Target endpoint
            content: Encoded request body
            headers: Request headers (content-type at least)
            timeout: Timeout in seconds applied to the whole exchange

        Returns:
            httpx.Request: Request ready to send

        Raises:
            TransportError: The request cannot be built (bad URL, bad header)
        """
        try:
            return httpx.Request(
                "POST",
                url,
                headers=headers,
                content=content,
                extensions={"timeout": httpx.Timeout(timeout).as_dict()},
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, TypeError, ValueError) as e:
            raise TransportError(str(e)) from e

    @abc.abstractmethod
    def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request and return once headers are received

        Raises:
            TransportError: Connection failure or timeout
        """
        pass

    @abc.abstractmethod
    def read(self, response: httpx.Response) -> bytes:
        """Read the full response body

        Raises:
            TransportError: Connection dropped or timed out while reading
        """
        pass

    @abc.abstractmethod
    async def send_async(self, request: httpx.Request) -> httpx.Response:
        """Coroutine form of send"""
        pass

    @abc.abstractmethod
    async def read_async(self, response: httpx.Response) -> bytes:
        """Coroutine form of read"""
        pass

    def close(self) -> None:
        """Release blocking resources"""
        pass

    async def aclose(self) -> None:
        """Release coroutine resources"""
        pass
