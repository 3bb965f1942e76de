"""
RPC client interface

Defines the calling contract shared by every client implementation, so that
callers and generated stubs do not depend on a concrete transport.
"""

import abc
from typing import Any, Callable, Optional


class RpcInterface(abc.ABC):
    """Client interface: one blocking and one coroutine call"""

    @abc.abstractmethod
    def call(self,
             method: str,
             params: Any = None,
             result_type: Optional[Callable[[Any], Any]] = None) -> Any:
        """Send a JSON-RPC 2.0 request and wait for the result

        Args:
            method: Remote method name
            params: Method parameters, {} when omitted
            result_type: Optional converter applied to the result

        Returns:
            Any: The call result

        Raises:
            Error: One of the client error kinds
        """
        pass

    @abc.abstractmethod
    async def call_async(self,
                         method: str,
                         params: Any = None,
                         result_type: Optional[Callable[[Any], Any]] = None) -> Any:
        """Coroutine form of call, same outcome and semantics"""
        pass
