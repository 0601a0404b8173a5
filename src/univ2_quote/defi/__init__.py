"""
DeFi adapters for univ2-quote.
"""
from .uniswap_v2 import (
    DegeneratePoolError,
    PoolMembershipError,
    PoolStateReader,
    UniswapV2Error,
    UniswapV2Quoter,
    get_amount_out,
    order_reserves,
)

__all__ = [
    "DegeneratePoolError",
    "PoolMembershipError",
    "PoolStateReader",
    "UniswapV2Error",
    "UniswapV2Quoter",
    "get_amount_out",
    "order_reserves",
]
