"""
httpx transport

Blocking calls go through an httpx.Client, coroutine calls through an
httpx.AsyncClient. Both are created lazily so a client used only one way
never opens the other.
"""

import logging
import threading
from typing import Optional

import httpx

from seam_rpc.rpc.errors import TransportError
from seam_rpc.transport.transport_interface import TransportInterface

logger = logging.getLogger(__name__)


class HttpxTransport(TransportInterface):
    """
    Transport backed by httpx. Connection handling, TLS and pooling are left
    to httpx; this class only maps its failures to TransportError.
    """

    def __init__(self,
                 client: Optional[httpx.Client] = None,
                 async_client: Optional[httpx.AsyncClient] = None):
        """Create the transport

        Args:
            client: httpx.Client for blocking calls, created on first use if omitted
            async_client: httpx.AsyncClient for coroutine calls, created on first use if omitted
        """
        self._client = client
        self._async_client = async_client
        self._lock = threading.Lock()

    @property
    def client(self) -> httpx.Client:
        with self._lock:
            if self._client is None:
                self._client = httpx.Client()
            return self._client

    @property
    def async_client(self) -> httpx.AsyncClient:
        with self._lock:
            if self._async_client is None:
                self._async_client = httpx.AsyncClient()
            return self._async_client

    def send(self, request: httpx.Request) -> httpx.Response:
        try:
            return self.client.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.debug(f"Transport send failed: {e!r}")
            raise TransportError(str(e) or type(e).__name__) from e
        except RuntimeError as e:
            # httpx refuses to send on a closed client
            raise TransportError(str(e)) from e

    def read(self, response: httpx.Response) -> bytes:
        try:
            return response.read()
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise TransportError(str(e) or type(e).__name__) from e
        finally:
            response.close()

    async def send_async(self, request: httpx.Request) -> httpx.Response:
        try:
            return await self.async_client.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.debug(f"Transport send failed: {e!r}")
            raise TransportError(str(e) or type(e).__name__) from e
        except RuntimeError as e:
            raise TransportError(str(e)) from e

    async def read_async(self, response: httpx.Response) -> bytes:
        try:
            return await response.aread()
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise TransportError(str(e) or type(e).__name__) from e
        finally:
            await response.aclose()

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

    async def aclose(self) -> None:
        if self._async_client is not None:
            await self._async_client.aclose()
        self.close()
