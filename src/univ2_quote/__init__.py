"""
univ2-quote: exact off-chain swap quotes for Uniswap V2 pools.

Usage:
    from univ2_quote import EthereumRPC, PoolStateReader, UniswapV2Quoter
"""

from univ2_quote.core.config import QuoteConfig
from univ2_quote.core.models import FeeRate, PoolReserves, SwapQuote, TokenInfo
from univ2_quote.core.rpc import EthereumRPC
from univ2_quote.defi.uniswap_v2 import PoolStateReader, UniswapV2Quoter

__version__ = "0.1.0"
__all__ = [
    "EthereumRPC",
    "FeeRate",
    "PoolReserves",
    "PoolStateReader",
    "QuoteConfig",
    "SwapQuote",
    "TokenInfo",
    "UniswapV2Quoter",
]
