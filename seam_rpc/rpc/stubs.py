"""
Typed client stubs

Turns a class of method signatures into a client for a remote service:

    @rpc_client
    class Calculator:
        def add(self, a: int, b: int) -> int: ...

        @rpc_method("sys.version")
        def version(self) -> str: ...

        async def slow_add(self, a: int, b: int) -> int: ...

    calc = Calculator(http_client("http://localhost:8080/rpc"))
    calc.add(2, 3)   # {"method":"add","params":{"a":2,"b":3}}

Arguments are bound by name (defaults applied) and sent as named params.
async def signatures become coroutine stubs using call_async.
"""

import functools
import inspect
from typing import Any, Callable, Dict, Optional

from seam_rpc.rpc.client_interface import RpcInterface

RPC_NAME_ATTR = "__rpc_name__"
RPC_RESULT_TYPE_ATTR = "__rpc_result_type__"
RPC_METHODS_ATTR = "__rpc_methods__"


def rpc_method(name: Optional[str] = None, result_type: Optional[Callable[[Any], Any]] = None):
    """Override the remote name or result converter of a stub method

    Args:
        name: Remote method name, the function name if omitted
        result_type: Converter applied to the result
    """
    def decorator(func):
        if name is not None:
            setattr(func, RPC_NAME_ATTR, name)
        if result_type is not None:
            setattr(func, RPC_RESULT_TYPE_ATTR, result_type)
        return func
    return decorator


def _bind_params(signature: inspect.Signature, args, kwargs) -> Dict[str, Any]:
    bound = signature.bind(*args, **kwargs)
    bound.apply_defaults()
    params = {}
    for index, (key, value) in enumerate(bound.arguments.items()):
        if index == 0:
            # self
            continue
        param = signature.parameters[key]
        if param.kind is inspect.Parameter.VAR_KEYWORD:
            params.update(value)
        elif param.kind is inspect.Parameter.VAR_POSITIONAL:
            raise TypeError(f"*{key} cannot be sent as named params")
        else:
            params[key] = value
    return params


def _make_stub(func: Callable) -> Callable:
    remote_name = getattr(func, RPC_NAME_ATTR, func.__name__)
    result_type = getattr(func, RPC_RESULT_TYPE_ATTR, None)
    signature = inspect.signature(func)

    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def async_stub(self, *args, **kwargs):
            params = _bind_params(signature, (self,) + args, kwargs)
            return await self.rpc.call_async(remote_name, params, result_type=result_type)
        return async_stub

    @functools.wraps(func)
    def stub(self, *args, **kwargs):
        params = _bind_params(signature, (self,) + args, kwargs)
        return self.rpc.call(remote_name, params, result_type=result_type)
    return stub


def _init(self, client: RpcInterface):
    self.rpc = client


def rpc_client(cls=None):
    """Class decorator generating RPC stubs for every public method

    The class receives an __init__(self, client) storing the client as
    self.rpc, unless it defines its own __init__.
    """
    def wrap(cls):
        methods = []
        for attr, member in list(vars(cls).items()):
            if attr.startswith("_") or not inspect.isfunction(member):
                continue
            setattr(cls, attr, _make_stub(member))
            methods.append(getattr(member, RPC_NAME_ATTR, attr))

        setattr(cls, RPC_METHODS_ATTR, tuple(methods))
        if "__init__" not in vars(cls):
            cls.__init__ = _init
        return cls

    if cls is None:
        return wrap
    return wrap(cls)
