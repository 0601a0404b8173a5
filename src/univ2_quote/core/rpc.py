"""
EthereumRPC: minimal JSON-RPC client for read-only contract calls.

Only the two methods a quote needs are exposed: eth_call and eth_blockNumber.

Reference: https://ethereum.org/en/developers/docs/apis/json-rpc/
"""

from __future__ import annotations

import itertools
import logging
from typing import Any

import httpx

logger = logging.getLogger("univ2_quote.rpc")


class RPCError(Exception):
    """Base class for JSON-RPC failures."""
    pass


class RPCConnectionError(RPCError):
    """Raised when the endpoint cannot be reached or answers with garbage."""
    pass


class RPCExecutionError(RPCError):
    """Raised when the node rejects or reverts a call."""

    def __init__(self, message: str, code: int | None = None, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.data = data


class EthereumRPC:
    """
    Synchronous JSON-RPC client.

    Usage:
        rpc = EthereumRPC("https://eth-mainnet.g.alchemy.com/v2/<key>")
        raw = rpc.call("0x0d4a11d5eeaac28ec3f61d100daf4d40471f1852", call_data)
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 15.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.rpc_url = rpc_url
        self._ids = itertools.count(1)
        self._client = httpx.Client(
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Chain reads
    # ------------------------------------------------------------------

    def call(self, to: str, data: bytes, block: str = "latest") -> bytes:
        """
        Execute a read-only eth_call.

        Args:
            to: contract address (0x hex)
            data: ABI-encoded call data
            block: block tag or hex number

        Returns:
            bytes: raw return data (may be empty for non-contracts)
        """
        result = self._request("eth_call", [{"to": to, "data": "0x" + data.hex()}, block])
        return _hex_to_bytes(result)

    def get_block_number(self) -> int:
        """Return the latest block number."""
        result = self._request("eth_blockNumber", [])
        try:
            return int(result, 16)
        except (TypeError, ValueError) as e:
            raise RPCConnectionError(f"Malformed eth_blockNumber result: {result!r}") from e

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _request(self, method: str, params: list[Any]) -> Any:
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        logger.debug(f"-> {method} {params}")
        try:
            response = self._client.post(self.rpc_url, json=payload)
        except httpx.TransportError as e:
            raise RPCConnectionError(f"Failed to reach RPC endpoint: {e}") from e

        if response.status_code != 200:
            raise RPCConnectionError(f"RPC error {response.status_code}: {response.text}")
        try:
            body = response.json()
        except ValueError as e:
            raise RPCConnectionError(f"RPC endpoint returned non-JSON body: {response.text[:200]}") from e

        if not isinstance(body, dict):
            raise RPCConnectionError(f"Unexpected JSON-RPC response: {body!r}")
        if body.get("error"):
            err = body["error"]
            if isinstance(err, dict):
                raise RPCExecutionError(
                    f"{method} failed: {err.get('message', err)}",
                    code=err.get("code"),
                    data=err.get("data"),
                )
            raise RPCExecutionError(f"{method} failed: {err}")
        if "result" not in body:
            raise RPCConnectionError(f"JSON-RPC response missing result: {body!r}")

        logger.debug(f"<- {method} {body['result']}")
        return body["result"]

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> EthereumRPC:
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()


def _hex_to_bytes(value: Any) -> bytes:
    if not isinstance(value, str) or not value.startswith("0x"):
        raise RPCConnectionError(f"Expected 0x-prefixed hex result, got {value!r}")
    try:
        return bytes.fromhex(value[2:])
    except ValueError as e:
        raise RPCConnectionError(f"Invalid hex in result: {value!r}") from e
