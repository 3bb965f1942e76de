"""
Typed stub tests
"""

import pytest

from seam_rpc.rpc.client_interface import RpcInterface
from seam_rpc.rpc.errors import RpcError
from seam_rpc.rpc.stubs import rpc_client, rpc_method


class RecordingClient(RpcInterface):
    """Records calls instead of sending them"""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def call(self, method, params=None, result_type=None):
        self.calls.append(("call", method, params, result_type))
        return self.result

    async def call_async(self, method, params=None, result_type=None):
        self.calls.append(("call_async", method, params, result_type))
        return self.result


@rpc_client
class Calculator:
    def add(self, a: int, b: int) -> int: ...

    def scale(self, value: float, factor: float = 2.0) -> float: ...

    def ping(self) -> str: ...

    @rpc_method("sys.version")
    def version(self) -> str: ...

    @rpc_method(result_type=int)
    def count(self) -> int: ...

    def tag(self, name: str, **labels) -> None: ...

    async def multiply(self, a: int, b: int) -> int: ...

    def _helper(self):
        return "local"


def test_named_params():
    rpc = RecordingClient(result=5)
    calc = Calculator(rpc)

    assert calc.add(2, 3) == 5
    assert calc.add(b=3, a=2) == 5
    assert rpc.calls == [
        ("call", "add", {"a": 2, "b": 3}, None),
        ("call", "add", {"a": 2, "b": 3}, None),
    ]


def test_defaults_are_sent():
    rpc = RecordingClient()
    Calculator(rpc).scale(1.5)
    assert rpc.calls[0][2] == {"value": 1.5, "factor": 2.0}


def test_no_arguments_send_empty_params():
    rpc = RecordingClient()
    Calculator(rpc).ping()
    assert rpc.calls[0][1:3] == ("ping", {})


def test_renamed_method():
    rpc = RecordingClient()
    Calculator(rpc).version()
    assert rpc.calls[0][1] == "sys.version"


def test_result_type_forwarded():
    rpc = RecordingClient()
    Calculator(rpc).count()
    assert rpc.calls[0][3] is int


def test_var_keyword_merged_into_params():
    rpc = RecordingClient()
    Calculator(rpc).tag("build", env="prod", region="eu")
    assert rpc.calls[0][2] == {"name": "build", "env": "prod", "region": "eu"}


def test_wrong_arguments_fail_locally():
    rpc = RecordingClient()
    with pytest.raises(TypeError):
        Calculator(rpc).add(1)
    assert rpc.calls == []


@pytest.mark.asyncio
async def test_async_stub_uses_call_async():
    rpc = RecordingClient(result=6)
    assert await Calculator(rpc).multiply(2, 3) == 6
    assert rpc.calls == [("call_async", "multiply", {"a": 2, "b": 3}, None)]


def test_private_methods_untouched():
    assert Calculator(RecordingClient())._helper() == "local"


def test_method_names_listed():
    assert Calculator.__rpc_methods__ == (
        "add", "scale", "ping", "sys.version", "count", "tag", "multiply",
    )


def test_stub_keeps_signature_metadata():
    assert Calculator.add.__name__ == "add"
    assert Calculator.add.__wrapped__.__annotations__["return"] is int


def test_custom_init_is_kept():
    @rpc_client()
    class Service:
        def __init__(self, client, prefix):
            self.rpc = client
            self.prefix = prefix

        def hello(self, name): ...

    rpc = RecordingClient()
    service = Service(rpc, "x")
    service.hello("bob")
    assert service.prefix == "x"
    assert rpc.calls[0][1:3] == ("hello", {"name": "bob"})


def test_stub_over_http(make_client, endpoint):
    endpoint.handler = lambda envelope: (
        {"result": envelope["params"]["a"] + envelope["params"]["b"]}
        if envelope["method"] == "add"
        else {"error": {"code": -32601, "message": "method not found"}}
    )
    calc = Calculator(make_client())

    assert calc.add(2, 3) == 5
    with pytest.raises(RpcError):
        calc.version()
