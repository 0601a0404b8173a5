"""core module init"""
from univ2_quote.core.abi import DecodingError
from univ2_quote.core.address import (
    AddressError,
    addresses_equal,
    normalize_address,
    validate_address,
)
from univ2_quote.core.config import ConfigError, QuoteConfig
from univ2_quote.core.models import (
    UNISWAP_V2_FEE,
    FeeRate,
    PoolReserves,
    SwapQuote,
    TokenInfo,
)
from univ2_quote.core.rpc import EthereumRPC, RPCConnectionError, RPCError, RPCExecutionError
from univ2_quote.core.units import format_amount, to_raw, to_readable

__all__ = [
    "AddressError",
    "ConfigError",
    "DecodingError",
    "EthereumRPC",
    "FeeRate",
    "PoolReserves",
    "QuoteConfig",
    "RPCConnectionError",
    "RPCError",
    "RPCExecutionError",
    "SwapQuote",
    "TokenInfo",
    "UNISWAP_V2_FEE",
    "addresses_equal",
    "format_amount",
    "normalize_address",
    "to_raw",
    "to_readable",
    "validate_address",
]
