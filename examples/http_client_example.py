#!/usr/bin/env python
"""
HTTP Client Example

Demonstrates blocking and asyncio JSON-RPC 2.0 calls, typed stubs and error
handling. Point SEAM_RPC_ENDPOINT at a JSON-RPC server, e.g.

    SEAM_RPC_ENDPOINT=http://localhost:8080/rpc python examples/http_client_example.py
"""

import asyncio
import logging

from seam_rpc import (
    ClientConfig,
    ClientFactory,
    Error,
    RpcError,
    configure_telemetry,
    rpc_client,
    rpc_method,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@rpc_client
class Calculator:
    def add(self, a: int, b: int) -> int: ...

    @rpc_method("sys.version")
    def version(self) -> str: ...

    async def multiply(self, a: int, b: int) -> int: ...


async def run_async(calc: Calculator):
    results = await asyncio.gather(*(calc.multiply(i, i) for i in range(5)))
    logger.info(f"Squares: {results}")
    await calc.rpc.aclose()


def main():
    config = ClientConfig.from_env()
    configure_telemetry(config)

    with ClientFactory.create_client(config) as client:
        calc = Calculator(client)
        try:
            logger.info(f"Server version: {calc.version()}")
            logger.info(f"2 + 3 = {calc.add(2, 3)}")
            asyncio.run(run_async(calc))
        except RpcError as e:
            logger.error(f"Server reported error {e.code}: {e.message}")
        except Error as e:
            logger.error(f"Call failed ({e.kind}): {e}")


if __name__ == "__main__":
    main()
