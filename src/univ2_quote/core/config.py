"""
Runtime configuration for quoting.

Built once at startup and handed to the RPC client and quoter; nothing else
reads the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

RPC_URL_ENV = "UNIV2_QUOTE_RPC_URL"
ALCHEMY_KEY_ENV = "ALCHEMY_API_KEY"
ALCHEMY_MAINNET_URL = "https://eth-mainnet.g.alchemy.com/v2/"


class ConfigError(Exception):
    """Raised when no usable RPC endpoint is configured."""
    pass


@dataclass(frozen=True)
class QuoteConfig:
    """
    Args:
        rpc_url:  Ethereum JSON-RPC endpoint (may embed an API key)
        timeout:  HTTP timeout in seconds for each RPC call
        strict:   If True, reject tokens that are not the pool's token0/token1
    """
    rpc_url: str
    timeout: float = 15.0
    strict: bool = True

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        rpc_url: str | None = None,
        **overrides: object,
    ) -> QuoteConfig:
        """
        Resolve the endpoint: explicit rpc_url, then UNIV2_QUOTE_RPC_URL,
        then an Alchemy mainnet URL built from ALCHEMY_API_KEY.

        Raises:
            ConfigError: if none of those is set
        """
        env = os.environ if environ is None else environ
        url = rpc_url or env.get(RPC_URL_ENV)
        if not url:
            key = env.get(ALCHEMY_KEY_ENV)
            if not key:
                raise ConfigError(
                    f"No RPC endpoint configured: pass --rpc-url, or set {RPC_URL_ENV} "
                    f"or {ALCHEMY_KEY_ENV}."
                )
            url = ALCHEMY_MAINNET_URL + key
        return cls(rpc_url=url, **overrides)  # type: ignore[arg-type]

    @property
    def redacted_url(self) -> str:
        """Endpoint with any Alchemy key masked, safe for logs."""
        if self.rpc_url.startswith(ALCHEMY_MAINNET_URL):
            return ALCHEMY_MAINNET_URL + "***"
        return self.rpc_url
