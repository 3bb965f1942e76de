"""
JSON-RPC 2.0 HTTP client

One call is one POST: the request envelope is encoded with the client's
encoder, sent through the transport, and the response is checked against the
envelope invariants before the result is handed back.

The blocking and coroutine calls share a single routine, _exchange, which
yields the two transport steps (send, read) to its driver. call() performs
them inline, call_async() awaits them.
"""

import logging
import threading
import time
from contextlib import contextmanager
from dataclasses import is_dataclass
from datetime import timedelta
from typing import Any, Callable, Generator, Optional, Tuple, Union

import httpx

from seam_rpc.encoders.encoder_interface import EncoderInterface
from seam_rpc.encoders.json_encoder import JsonEncoder
from seam_rpc.rpc.client_interface import RpcInterface
from seam_rpc.rpc.envelope import JSONRPC_VERSION, Request, Response
from seam_rpc.rpc.errors import (
    INVALID_RESPONSE_ID,
    INVALID_VERSION,
    NO_RESULT_OR_ERROR,
    DecodeError,
    Error,
    HttpError,
    ProtocolError,
)
from seam_rpc.telemetry.metrics import increment_counter, record_latency
from seam_rpc.telemetry.tracer import create_span, inject_trace_context
from seam_rpc.transport.httpx_transport import HttpxTransport
from seam_rpc.transport.transport_interface import TransportInterface

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0

# Request ids are unsigned 64-bit and wrap on overflow
ID_MASK = (1 << 64) - 1

# Transport steps yielded by _exchange
SEND = "send"
READ = "read"

Step = Tuple[str, Any]


class HttpClient(RpcInterface):
    """
    JSON-RPC 2.0 client over HTTP.

    Safe to share between threads and asyncio tasks: the request id counter
    is the only state that changes after construction.
    """

    def __init__(self,
                 url: str,
                 encoder: Optional[EncoderInterface] = None,
                 transport: Optional[TransportInterface] = None):
        """Create a client

        Args:
            url: Endpoint URL
            encoder: Wire encoder, JsonEncoder if omitted
            transport: Transport, HttpxTransport if omitted
        """
        self._url = url
        self._timeout = DEFAULT_TIMEOUT
        self._encoder = encoder if encoder is not None else JsonEncoder()
        self._transport = transport if transport is not None else HttpxTransport()
        self._req_id = 0
        self._id_lock = threading.Lock()

    @property
    def url(self) -> str:
        return self._url

    @property
    def encoder(self) -> EncoderInterface:
        return self._encoder

    @property
    def transport(self) -> TransportInterface:
        return self._transport

    @property
    def timeout_seconds(self) -> float:
        return self._timeout

    def timeout(self, timeout: Union[float, timedelta]) -> "HttpClient":
        """Override the request timeout, meant to be chained after construction

        Args:
            timeout: Seconds or timedelta, must be positive

        Returns:
            HttpClient: This client
        """
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        self._timeout = float(timeout)
        return self

    def _next_id(self) -> int:
        with self._id_lock:
            req_id = self._req_id
            self._req_id = (req_id + 1) & ID_MASK
        return req_id

    def _prepare_http_request(self, method: str, params: Any) -> Tuple[httpx.Request, int]:
        request = Request(
            id=self._next_id(),
            method=method,
            params={} if params is None else params,
        )
        payload = self._encoder.encode(request.to_dict())

        headers = {"content-type": self._encoder.mime()}
        inject_trace_context(headers)

        http_request = self._transport.build_request(self._url, payload, headers, self._timeout)
        return http_request, request.id

    def _exchange(self,
                  method: str,
                  params: Any,
                  result_type: Optional[Callable[[Any], Any]]) -> Generator[Step, Any, Any]:
        http_request, req_id = self._prepare_http_request(method, params)
        logger.debug(f"Sending request {req_id}: {method} -> {self._url}")

        http_response = yield SEND, http_request
        body = yield READ, http_response

        if http_response.status_code != httpx.codes.OK:
            raise HttpError(http_response.status_code, http_response.text)

        return self._parse_response(body, req_id, result_type)

    def _parse_response(self,
                        data: bytes,
                        req_id: int,
                        result_type: Optional[Callable[[Any], Any]] = None) -> Any:
        resp = Response.from_dict(self._encoder.decode(data))
        if resp.jsonrpc != JSONRPC_VERSION:
            raise ProtocolError(INVALID_VERSION)
        if resp.id != req_id:
            raise ProtocolError(INVALID_RESPONSE_ID)
        # error wins over result when a server sends both
        if resp.error is not None:
            raise resp.error
        if resp.has_result:
            return _convert_result(resp.result, result_type)
        raise ProtocolError(NO_RESULT_OR_ERROR)

    @contextmanager
    def _observe(self, method: str):
        attributes = {"method": method, "encoding": self._encoder.mime()}
        start_time = time.time()
        increment_counter("rpc.client.requests", 1, attributes)

        with create_span("rpc.client.call", {"rpc.system": "jsonrpc", "rpc.method": method}):
            try:
                yield
            except Error as e:
                increment_counter("rpc.client.errors", 1, {**attributes, "type": e.kind})
                raise

        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.client.latency", latency_ms, attributes)
        increment_counter("rpc.client.success", 1, attributes)
        logger.debug(f"Call {method} completed in {latency_ms:.2f}ms")

    def _perform(self, op: str, arg: Any) -> Any:
        if op == SEND:
            return self._transport.send(arg)
        return self._transport.read(arg)

    async def _perform_async(self, op: str, arg: Any) -> Any:
        if op == SEND:
            return await self._transport.send_async(arg)
        return await self._transport.read_async(arg)

    def call(self,
             method: str,
             params: Any = None,
             result_type: Optional[Callable[[Any], Any]] = None) -> Any:
        flow = self._exchange(method, params, result_type)
        with self._observe(method):
            try:
                op, arg = next(flow)
                while True:
                    op, arg = flow.send(self._perform(op, arg))
            except StopIteration as stop:
                return stop.value

    async def call_async(self,
                         method: str,
                         params: Any = None,
                         result_type: Optional[Callable[[Any], Any]] = None) -> Any:
        flow = self._exchange(method, params, result_type)
        with self._observe(method):
            try:
                op, arg = next(flow)
                while True:
                    op, arg = flow.send(await self._perform_async(op, arg))
            except StopIteration as stop:
                return stop.value

    def close(self) -> None:
        """Close the transport"""
        self._transport.close()

    async def aclose(self) -> None:
        """Close the transport, coroutine form"""
        await self._transport.aclose()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.aclose()

    def __repr__(self) -> str:
        return f"HttpClient(url={self._url!r}, encoder={self._encoder!r}, timeout={self._timeout})"


def _convert_result(result: Any, result_type: Optional[Callable[[Any], Any]]) -> Any:
    if result_type is None:
        return result
    try:
        if is_dataclass(result_type) and isinstance(result, dict):
            return result_type(**result)
        return result_type(result)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"cannot convert result to {getattr(result_type, '__name__', result_type)}: {e}") from e
