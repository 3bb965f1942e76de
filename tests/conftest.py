"""Pytest fixtures: an in-memory JSON-RPC endpoint behind httpx.MockTransport."""

import json

import httpx
import msgpack
import pytest

from seam_rpc.encoders import MIME_MSGPACK
from seam_rpc.rpc.client import HttpClient
from seam_rpc.transport import HttpxTransport

TEST_ENDPOINT = "http://rpc.test/api"


def decode_body(request: httpx.Request):
    if request.headers.get("content-type") == MIME_MSGPACK:
        return msgpack.unpackb(request.content, raw=False)
    return json.loads(request.content)


def encode_body(request: httpx.Request, payload) -> bytes:
    if request.headers.get("content-type") == MIME_MSGPACK:
        return msgpack.packb(payload, use_bin_type=True)
    return json.dumps(payload).encode("utf-8")


class FakeEndpoint:
    """
    Records every request and answers through `handler`.

    handler receives the decoded request envelope and returns either a dict
    merged into {"jsonrpc": "2.0", "id": <request id>}, raw bytes, or a
    ready httpx.Response. The default handler echoes params as the result.
    """

    def __init__(self):
        self.requests = []
        self.handler = lambda envelope: {"result": envelope["params"]}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        envelope = decode_body(request)
        reply = self.handler(envelope)
        if isinstance(reply, httpx.Response):
            return reply
        if isinstance(reply, bytes):
            return httpx.Response(200, content=reply)
        body = {"jsonrpc": "2.0", "id": envelope["id"]}
        body.update(reply)
        return httpx.Response(
            200,
            content=encode_body(request, body),
            headers={"content-type": request.headers["content-type"]},
        )

    @property
    def envelopes(self):
        return [decode_body(request) for request in self.requests]


def mock_transport(handler) -> HttpxTransport:
    return HttpxTransport(
        client=httpx.Client(transport=httpx.MockTransport(handler)),
        async_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.fixture
def endpoint():
    return FakeEndpoint()


@pytest.fixture
def make_client(endpoint):
    """Factory for clients wired to the fake endpoint"""
    clients = []

    def factory(encoder=None, handler=None):
        client = HttpClient(TEST_ENDPOINT, encoder=encoder, transport=mock_transport(handler or endpoint))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def client(make_client):
    return make_client()
