#!/usr/bin/env python3
"""
Example 01: Quote a swap on a Uniswap V2 pair without prompts.

Sells WETH for USDT on the canonical mainnet pair and prints the exact output.

Usage:
    ALCHEMY_API_KEY=... python examples/01_swap_quote.py
    ALCHEMY_API_KEY=... python examples/01_swap_quote.py 5.0     # sell 5 WETH
"""

import sys
from decimal import Decimal

from univ2_quote import EthereumRPC, PoolStateReader, QuoteConfig, UniswapV2Quoter
from univ2_quote.core.units import format_amount

POOL = "0x0d4a11d5eeaac28ec3f61d100daf4d40471f1852"
WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
USDT = "0xdac17f958d2ee523a2206206994597c13d831ec7"

amount = Decimal(sys.argv[1]) if len(sys.argv) > 1 else Decimal("1")

config = QuoteConfig.from_env()
rpc = EthereumRPC(config.rpc_url, timeout=config.timeout)
quoter = UniswapV2Quoter(PoolStateReader(rpc))

print(f"Getting quote: {amount} WETH -> USDT")
print()

quote = quoter.get_quote(POOL, WETH, USDT, amount)

print("=== Swap Quote ===")
print(f"Input:        {amount} {quote.token_in.symbol} ({quote.amount_in_raw} raw)")
print(f"Output:       {format_amount(quote.amount_out)} {quote.output_symbol} ({quote.amount_out_raw} raw)")
print(f"Pool:         {quote.pool_address[:16]}...")
print(f"Fee:          {format_amount(quote.fee.fee_pct, 1)}%")
print(f"Price impact: {format_amount(quote.price_impact_pct, 2)}%")

rpc.close()
