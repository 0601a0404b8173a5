"""
univ2-quote CLI: prompt for a pool, two tokens and an amount, then print the
exact Uniswap V2 output.

Usage:
    univ2-quote                          # endpoint from UNIV2_QUOTE_RPC_URL / ALCHEMY_API_KEY
    univ2-quote --rpc-url http://localhost:8545
    univ2-quote --lenient -v             # skip the pool membership check, debug logging
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from decimal import Decimal

from univ2_quote.cli.inputs import (
    DEFAULT_INPUT_AMOUNT,
    DEFAULT_INPUT_TOKEN_ADDRESS,
    DEFAULT_OUTPUT_TOKEN_ADDRESS,
    DEFAULT_POOL_ADDRESS,
    QuoteRequest,
    parse_address,
    parse_amount,
)
from univ2_quote.core.abi import DecodingError
from univ2_quote.core.address import AddressError
from univ2_quote.core.config import ConfigError, QuoteConfig
from univ2_quote.core.models import SwapQuote, TokenInfo
from univ2_quote.core.rpc import EthereumRPC, RPCError
from univ2_quote.core.units import format_amount
from univ2_quote.defi.uniswap_v2 import PoolStateReader, UniswapV2Error, UniswapV2Quoter

logger = logging.getLogger("univ2_quote.cli")

Reader = Callable[[str], str]
Writer = Callable[[str], None]

BANNER = """\
==================================================
|          Uniswap V2 Price Bot Input CLI        |
==================================================
| Calculates the amount of an output token       |
| for a given input token and amount             |
|                                                |
| You can hit enter on all input fields to       |
| default to selling 1 ETH for USDT              |
=================================================="""

FATAL_ERRORS = (ConfigError, RPCError, DecodingError, AddressError, UniswapV2Error)


# ------------------------------------------------------------------
# Prompts
# ------------------------------------------------------------------

def _read(read: Reader, prompt: str) -> str | None:
    try:
        return read(prompt)
    except EOFError:
        return None


def prompt_address(prompt: str, default: str, read: Reader = input, write: Writer = print) -> str:
    while True:
        result = parse_address(_read(read, prompt), default)
        if result.ok:
            if result.used_default:
                write(f"Using default address: {default}")
            return result.value
        write(f"Error: {result.error}")


def prompt_amount(prompt: str, default: str, read: Reader = input, write: Writer = print) -> Decimal:
    while True:
        result = parse_amount(_read(read, prompt), default)
        if result.used_default:
            write(f"Using default value for amount: {default}")
        if result.ok:
            return result.value
        write(f"Error: {result.error}")


def collect_request(read: Reader = input, write: Writer = print) -> QuoteRequest:
    """Ask for the four quote inputs, re-prompting until each one parses."""
    return QuoteRequest(
        pool_address=prompt_address("Enter Uniswap pool address (0x...): ", DEFAULT_POOL_ADDRESS, read, write),
        input_token_address=prompt_address(
            "Enter Input Token address (0x...): ", DEFAULT_INPUT_TOKEN_ADDRESS, read, write
        ),
        output_token_address=prompt_address(
            "Enter Output Token address (0x...): ", DEFAULT_OUTPUT_TOKEN_ADDRESS, read, write
        ),
        input_amount=prompt_amount(
            "Enter input amount (human readable please, e.g. 1, 1.3 0.7777): ",
            DEFAULT_INPUT_AMOUNT,
            read,
            write,
        ),
    )


# ------------------------------------------------------------------
# Output
# ------------------------------------------------------------------

def format_request(request: QuoteRequest) -> str:
    return "\n".join([
        "",
        "Input Request Summary:",
        f"Pool Address: {request.pool_address}",
        f"Input Token Address: {request.input_token_address}",
        f"Output Token Address: {request.output_token_address}",
        f"Input Amount: {format_amount(request.input_amount)}",
    ])


def _format_token(label: str, token: TokenInfo) -> list[str]:
    return [
        "",
        f"{label} Token Balance in Pool: {token.balance}",
        f"{label} Token Decimals: {token.decimals}",
        f"{label} Token Symbol: {token.symbol}",
        f"{label} Token Readable Balance: {format_amount(token.readable_balance)}",
    ]


def format_quote(quote: SwapQuote) -> str:
    """Render a quote as the multi-line summary printed by the CLI."""
    lines = [
        "",
        "Pool Reserves:",
        f"Reserve0: {quote.reserves.reserve0}",
        f"Reserve1: {quote.reserves.reserve1}",
    ]
    lines += _format_token("Input", quote.token_in)
    lines += _format_token("Output", quote.token_out)
    lines += [
        "",
        f"Input Amount (raw with decimals): {quote.amount_in_raw}",
        f"Input token is token{0 if quote.token_in_is_token0 else 1} in the pool",
        f"Fee: {format_amount(quote.fee.fee_pct, 2)}%",
        f"Output Amount (raw): {quote.amount_out_raw}",
        f"Output Amount (human-readable): {format_amount(quote.amount_out)} {quote.output_symbol}",
        f"Price impact: {format_amount(quote.price_impact_pct, 2)}%",
    ]
    return "\n".join(lines)


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="univ2-quote",
        description="Exact Uniswap V2 swap quote from live pool reserves.",
    )
    parser.add_argument("--rpc-url", help="Ethereum JSON-RPC endpoint (overrides environment)")
    parser.add_argument("--timeout", type=float, default=15.0, help="per-call timeout in seconds")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="don't check that the tokens belong to the pool",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None, read: Reader = input, write: Writer = print) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    write(BANNER)
    request = collect_request(read, write)
    write(format_request(request))

    try:
        config = QuoteConfig.from_env(
            rpc_url=args.rpc_url, timeout=args.timeout, strict=not args.lenient
        )
    except ConfigError as e:
        write(f"Error: {e}")
        return 1
    logger.info(f"Using RPC endpoint {config.redacted_url}")

    write("------ Calling RPC for amount data ------")
    with EthereumRPC(config.rpc_url, timeout=config.timeout) as rpc:
        try:
            quoter = UniswapV2Quoter(PoolStateReader(rpc), strict=config.strict)
            quote = quoter.get_quote(
                request.pool_address,
                request.input_token_address,
                request.output_token_address,
                request.input_amount,
            )
        except FATAL_ERRORS as e:
            logger.debug("Quote failed", exc_info=True)
            write(f"Error: {e}")
            return 1

    write(format_quote(quote))
    return 0


if __name__ == "__main__":
    sys.exit(main())
