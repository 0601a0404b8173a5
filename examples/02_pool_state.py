#!/usr/bin/env python3
"""
Example 02: Read raw pool state.

Prints reserves, token ordering and token metadata for a Uniswap V2 pair.

Usage:
    ALCHEMY_API_KEY=... python examples/02_pool_state.py [pool_address]
"""

import sys

from univ2_quote import EthereumRPC, PoolStateReader, QuoteConfig
from univ2_quote.core.units import format_amount, to_readable

pool = sys.argv[1] if len(sys.argv) > 1 else "0x0d4a11d5eeaac28ec3f61d100daf4d40471f1852"

config = QuoteConfig.from_env()
with EthereumRPC(config.rpc_url, timeout=config.timeout) as rpc:
    block = rpc.get_block_number()
    reader = PoolStateReader(rpc)
    reserves = reader.get_reserves(pool)
    token0 = reader.get_token_info(reader.get_token0(pool), holder=pool)
    token1 = reader.get_token_info(reader.get_token1(pool), holder=pool)

print(f"Pool {pool} at block {block}  (last update: {reserves.block_timestamp_last})")
for label, token, reserve in (("token0", token0, reserves.reserve0), ("token1", token1, reserves.reserve1)):
    print(f"  {label}: {token.symbol:<8} {token.address}")
    print(f"          reserve {format_amount(to_readable(reserve, token.decimals))}  (decimals {token.decimals})")
