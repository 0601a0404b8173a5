"""
Shared fixtures: an in-memory stand-in for the JSON-RPC endpoint.

The fake pool mirrors the worked example used throughout the tests:
token0 = AAA (12 decimals, reserve 10**12), token1 = BBB (6 decimals,
reserve 2_000_000).
"""

import pytest
from eth_abi import encode

from univ2_quote.core import abi
from univ2_quote.core.rpc import RPCExecutionError

POOL = "0x0d4a11d5eeaac28ec3f61d100daf4d40471f1852"
TOKEN_A = "0x00000000000000000000000000000000000000aa"
TOKEN_B = "0x00000000000000000000000000000000000000bb"
TOKEN_C = "0x00000000000000000000000000000000000000cc"  # not in the pool


def word(n: int) -> bytes:
    return n.to_bytes(32, "big")


def address_word(address: str) -> bytes:
    return bytes(12) + bytes.fromhex(address[2:])


class FakeRPC:
    """Answers eth_calls from a (contract, selector) table; unknown calls revert."""

    def __init__(self) -> None:
        self.responses: dict[tuple[str, bytes], bytes | Exception] = {}
        self.calls: list[tuple[str, bytes]] = []
        self.block_number = 19_000_000
        self.block_number_calls = 0

    def set(self, to: str, signature: str, result: bytes | Exception) -> None:
        self.responses[(to.lower(), abi.selector(signature))] = result

    def call(self, to: str, data: bytes, block: str = "latest") -> bytes:
        self.calls.append((to.lower(), data))
        result = self.responses.get((to.lower(), data[:4]))
        if result is None:
            raise RPCExecutionError("execution reverted", code=-32000)
        if isinstance(result, Exception):
            raise result
        return result

    def called_signatures(self) -> list[tuple[str, bytes]]:
        return [(to, data[:4]) for to, data in self.calls]

    def get_block_number(self) -> int:
        self.block_number_calls += 1
        return self.block_number

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()


def add_token(rpc: FakeRPC, token: str, decimals: int, symbol: str, balance: int) -> None:
    rpc.set(token, abi.BALANCE_OF, word(balance))
    rpc.set(token, abi.DECIMALS, word(decimals))
    rpc.set(token, abi.SYMBOL, encode(["string"], [symbol]))


def set_reserves(rpc: FakeRPC, reserve0: int, reserve1: int, timestamp: int = 1_700_000_000) -> None:
    rpc.set(POOL, abi.GET_RESERVES, word(reserve0) + word(reserve1) + word(timestamp))


@pytest.fixture
def fake_rpc() -> FakeRPC:
    rpc = FakeRPC()
    set_reserves(rpc, 10**12, 2_000_000)
    rpc.set(POOL, abi.TOKEN0, address_word(TOKEN_A))
    rpc.set(POOL, abi.TOKEN1, address_word(TOKEN_B))
    add_token(rpc, TOKEN_A, decimals=12, symbol="AAA", balance=10**12)
    add_token(rpc, TOKEN_B, decimals=6, symbol="BBB", balance=2_000_000)
    add_token(rpc, TOKEN_C, decimals=18, symbol="CCC", balance=0)
    return rpc
