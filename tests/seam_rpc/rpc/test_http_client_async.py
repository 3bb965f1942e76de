"""
HTTP client tests (asyncio calls)

call_async must be indistinguishable from call except for scheduling.
"""

import asyncio

import httpx
import pytest

from seam_rpc.encoders import MsgPackEncoder
from seam_rpc.rpc.client import HttpClient
from seam_rpc.rpc.errors import HttpError, ProtocolError, RpcError, TransportError
from seam_rpc.transport import HttpxTransport

TEST_ENDPOINT = "http://rpc.test/api"


@pytest.mark.asyncio
async def test_get_answer(client, endpoint):
    endpoint.handler = lambda envelope: {"result": 42}

    assert await client.call_async("get_answer") == 42
    assert endpoint.envelopes[0]["method"] == "get_answer"


@pytest.mark.asyncio
async def test_method_not_found(client, endpoint):
    endpoint.handler = lambda envelope: {"error": {"code": -32601, "message": "method not found"}}

    with pytest.raises(RpcError) as exc_info:
        await client.call_async("missing")
    assert exc_info.value.code == -32601
    assert exc_info.value.message == "method not found"


@pytest.mark.asyncio
async def test_http_error(client, endpoint):
    endpoint.handler = lambda envelope: httpx.Response(500, text="internal error")

    with pytest.raises(HttpError) as exc_info:
        await client.call_async("get_answer")
    assert (exc_info.value.status_code, exc_info.value.body) == (500, "internal error")


@pytest.mark.asyncio
async def test_mismatched_id(client, endpoint):
    endpoint.handler = lambda envelope: {"id": envelope["id"] + 7, "result": 42}

    with pytest.raises(ProtocolError) as exc_info:
        await client.call_async("get_answer")
    assert exc_info.value.reason == "invalid response ID"


@pytest.mark.asyncio
@pytest.mark.parametrize("encoder_cls", [None, MsgPackEncoder])
async def test_blocking_and_async_requests_are_identical(make_client, endpoint, encoder_cls):
    blocking = make_client(encoder=encoder_cls() if encoder_cls else None)
    suspending = make_client(encoder=encoder_cls() if encoder_cls else None)
    params = {"text": "echo me", "n": [1, 2, 3]}

    blocking_result = blocking.call("echo", params)
    async_result = await suspending.call_async("echo", params)

    first, second = endpoint.requests
    assert first.content == second.content
    assert first.headers["content-type"] == second.headers["content-type"]
    assert first.extensions["timeout"] == second.extensions["timeout"]
    assert blocking_result == async_result == params


@pytest.mark.asyncio
async def test_concurrent_tasks_get_unique_ids(client, endpoint):
    results = await asyncio.gather(*(client.call_async("echo", {"n": i}) for i in range(50)))

    assert results == [{"n": i} for i in range(50)]
    assert sorted(envelope["id"] for envelope in endpoint.envelopes) == list(range(50))


@pytest.mark.asyncio
async def test_mixed_blocking_and_async_share_counter(client, endpoint):
    client.call("echo", {})
    await client.call_async("echo", {})
    client.call("echo", {})
    assert [envelope["id"] for envelope in endpoint.envelopes] == [0, 1, 2]


@pytest.mark.asyncio
async def test_transport_error(make_client):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler=refuse)

    with pytest.raises(TransportError):
        await client.call_async("echo")


@pytest.mark.asyncio
async def test_cancelled_call_leaves_client_usable(endpoint):
    release = asyncio.Event()

    async def slow_then_fast(request):
        if not release.is_set():
            await release.wait()
        return endpoint(request)

    transport = HttpxTransport(async_client=httpx.AsyncClient(transport=httpx.MockTransport(slow_then_fast)))
    async with HttpClient(TEST_ENDPOINT, transport=transport) as client:
        pending = asyncio.ensure_future(client.call_async("slow", {}))
        await asyncio.sleep(0.01)
        pending.cancel()
        with pytest.raises(asyncio.CancelledError):
            await pending

        release.set()
        assert await client.call_async("echo", {"ok": True}) == {"ok": True}

    # the cancelled call consumed id 0
    assert [envelope["id"] for envelope in endpoint.envelopes] == [1]


@pytest.mark.asyncio
async def test_call_after_aclose_is_transport_error(client, endpoint):
    await client.aclose()

    with pytest.raises(TransportError):
        await client.call_async("echo", {})
    assert endpoint.requests == []
