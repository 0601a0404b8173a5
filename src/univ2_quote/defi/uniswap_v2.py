"""
Uniswap V2: off-chain swap quotes that match the pair contract exactly.

A V2 pair holds reserves of token0 and token1 and enforces x*y=k after a
0.3% fee on the input leg. UniswapV2Library.getAmountOut computes:

    amountInWithFee = amountIn * 997
    amountOut = reserveOut * amountInWithFee / (reserveIn * 1000 + amountInWithFee)

with truncating uint256 division. Python ints are unbounded, so the same
expression evaluated here cannot overflow and returns the same value.

This module:
1. Reads pair and token state through read-only eth_calls
2. Orders the reserves for the swap direction
3. Computes the exact output amount

Reference: https://github.com/Uniswap/v2-periphery/blob/master/contracts/libraries/UniswapV2Library.sol
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Protocol

from univ2_quote.core import abi
from univ2_quote.core.abi import DecodingError
from univ2_quote.core.address import addresses_equal, normalize_address
from univ2_quote.core.models import (
    UNISWAP_V2_FEE,
    UNKNOWN_SYMBOL,
    FeeRate,
    PoolReserves,
    SwapQuote,
    TokenInfo,
)
from univ2_quote.core.rpc import RPCExecutionError
from univ2_quote.core.units import to_raw, to_readable

logger = logging.getLogger("univ2_quote.uniswap_v2")


class UniswapV2Error(Exception):
    pass


class PoolMembershipError(UniswapV2Error):
    """Raised when a token is not one of the pair's two assets."""
    pass


class DegeneratePoolError(UniswapV2Error, ZeroDivisionError):
    """Raised when the swap formula would divide by zero (empty pool)."""
    pass


class ContractCaller(Protocol):
    def call(self, to: str, data: bytes, block: str = "latest") -> bytes: ...


# ------------------------------------------------------------------
# Swap math
# ------------------------------------------------------------------

def get_amount_out(
    reserve_in: int,
    reserve_out: int,
    amount_in: int,
    fee: FeeRate = UNISWAP_V2_FEE,
) -> int:
    """
    Output amount for an exact-input swap, in raw units.

    Args:
        reserve_in: reserve of the token being sold
        reserve_out: reserve of the token being bought
        amount_in: raw input amount
        fee: retained share of the input

    Returns:
        int: floor(reserve_out * in_with_fee / (reserve_in * fee.denominator + in_with_fee))

    Raises:
        ValueError: on negative or non-integer operands
        DegeneratePoolError: if the denominator is zero
    """
    for name, value in (("reserve_in", reserve_in), ("reserve_out", reserve_out), ("amount_in", amount_in)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"{name} must be non-negative: {value}")

    amount_in_with_fee = amount_in * fee.numerator
    numerator = reserve_out * amount_in_with_fee
    denominator = reserve_in * fee.denominator + amount_in_with_fee
    if denominator == 0:
        raise DegeneratePoolError(
            f"Division by zero in swap formula (reserve_in={reserve_in}, amount_in={amount_in})"
        )
    return numerator // denominator


def order_reserves(token0: str, token_in: str, reserves: PoolReserves) -> tuple[int, int]:
    """
    Return (reserve_in, reserve_out) for a swap selling token_in.

    Any token_in other than token0 is treated as token1.
    """
    if addresses_equal(token0, token_in):
        return reserves.reserve0, reserves.reserve1
    return reserves.reserve1, reserves.reserve0


def price_impact_pct(reserve_in: int, reserve_out: int, amount_in: int, amount_out: int) -> Decimal:
    """
    Shortfall of the execution price against the pre-trade spot price, in percent.
    Includes the LP fee.
    """
    if amount_in == 0 or reserve_in == 0 or reserve_out == 0:
        return Decimal(0)
    execution = Decimal(amount_out) / Decimal(amount_in)
    spot = Decimal(reserve_out) / Decimal(reserve_in)
    return (1 - execution / spot) * 100


# ------------------------------------------------------------------
# Chain reads
# ------------------------------------------------------------------

class PoolStateReader:
    """
    Reads pair reserves and ERC-20 metadata through eth_call.

    Usage:
        reader = PoolStateReader(rpc)
        reserves = reader.get_reserves(pool)
        token = reader.get_token_info(token_address, holder=pool)
    """

    def __init__(self, rpc: ContractCaller) -> None:
        self._rpc = rpc

    def get_reserves(self, pool: str) -> PoolReserves:
        data = self._rpc.call(pool, abi.encode_call(abi.GET_RESERVES))
        reserve0, reserve1, timestamp = abi.decode_reserves(data)
        logger.debug(f"Reserves for {pool}: {reserve0} / {reserve1} @ {timestamp}")
        return PoolReserves(reserve0=reserve0, reserve1=reserve1, block_timestamp_last=timestamp)

    def get_token0(self, pool: str) -> str:
        return abi.decode_address(self._rpc.call(pool, abi.encode_call(abi.TOKEN0)))

    def get_token1(self, pool: str) -> str:
        return abi.decode_address(self._rpc.call(pool, abi.encode_call(abi.TOKEN1)))

    def get_balance(self, token: str, holder: str) -> int:
        data = self._rpc.call(token, abi.encode_call(abi.BALANCE_OF, ["address"], [holder]))
        return abi.decode_uint256(data)

    def get_decimals(self, token: str) -> int:
        return abi.decode_uint8(self._rpc.call(token, abi.encode_call(abi.DECIMALS)))

    def get_symbol(self, token: str) -> str:
        return abi.decode_string(self._rpc.call(token, abi.encode_call(abi.SYMBOL)))

    def get_token_info(self, token: str, holder: str) -> TokenInfo:
        """
        Fetch balance (held by `holder`), decimals and symbol for a token.

        A token whose symbol() reverts or returns garbage is still usable;
        its symbol falls back to UNKNOWN.
        """
        balance = self.get_balance(token, holder)
        decimals = self.get_decimals(token)
        try:
            symbol = self.get_symbol(token)
        except (RPCExecutionError, DecodingError) as e:
            logger.warning(f"symbol() unavailable for {token}, using {UNKNOWN_SYMBOL}: {e}")
            symbol = UNKNOWN_SYMBOL
        return TokenInfo(address=token, decimals=decimals, symbol=symbol, balance=balance)


# ------------------------------------------------------------------
# Quote pipeline
# ------------------------------------------------------------------

class UniswapV2Quoter:
    """
    Exact-input quotes against a single Uniswap V2 pair.

    Usage:
        quoter = UniswapV2Quoter(PoolStateReader(rpc))
        quote = quoter.get_quote(pool, weth, usdt, Decimal("1"))
        print(f"You get: {quote.amount_out} {quote.output_symbol}")
    """

    def __init__(
        self,
        reader: PoolStateReader,
        fee: FeeRate = UNISWAP_V2_FEE,
        strict: bool = True,
    ) -> None:
        self._reader = reader
        self.fee = fee
        self.strict = strict

    def get_quote(self, pool: str, token_in: str, token_out: str, amount: Decimal) -> SwapQuote:
        """
        Quote selling `amount` (human units) of token_in for token_out.

        Every read runs in order and the first failure aborts the quote.

        Raises:
            AddressError: malformed address
            RPCError: the endpoint failed or rejected a call
            DecodingError: a call returned data of the wrong shape
            PoolMembershipError: (strict) tokens don't match the pair
            DegeneratePoolError: the pair has an empty reserve
        """
        pool = normalize_address(pool)
        token_in = normalize_address(token_in)
        token_out = normalize_address(token_out)

        reserves = self._reader.get_reserves(pool)
        in_info = self._reader.get_token_info(token_in, holder=pool)
        out_info = self._reader.get_token_info(token_out, holder=pool)
        token0 = self._reader.get_token0(pool)

        if self.strict:
            token1 = self._reader.get_token1(pool)
            self._check_membership(pool, token0, token1, token_in, token_out)

        if reserves.reserve0 == 0 or reserves.reserve1 == 0:
            raise DegeneratePoolError(
                f"Pool {pool} has an empty reserve ({reserves.reserve0} / {reserves.reserve1})"
            )

        amount_in_raw = to_raw(amount, in_info.decimals)
        is_token0 = addresses_equal(token0, token_in)
        reserve_in, reserve_out = order_reserves(token0, token_in, reserves)
        logger.info(f"Input token is token{0 if is_token0 else 1} in the pool")

        amount_out_raw = get_amount_out(reserve_in, reserve_out, amount_in_raw, self.fee)
        logger.info(f"Quoted {amount_in_raw} raw {in_info.symbol} -> {amount_out_raw} raw {out_info.symbol}")

        return SwapQuote(
            pool_address=pool,
            token_in=in_info,
            token_out=out_info,
            amount_in=amount,
            amount_in_raw=amount_in_raw,
            amount_out_raw=amount_out_raw,
            amount_out=to_readable(amount_out_raw, out_info.decimals),
            token_in_is_token0=is_token0,
            reserves=reserves,
            fee=self.fee,
            price_impact_pct=price_impact_pct(reserve_in, reserve_out, amount_in_raw, amount_out_raw),
        )

    @staticmethod
    def _check_membership(pool: str, token0: str, token1: str, token_in: str, token_out: str) -> None:
        pair = (token0, token1)
        for label, token in (("Input", token_in), ("Output", token_out)):
            if not any(addresses_equal(token, t) for t in pair):
                raise PoolMembershipError(
                    f"{label} token {token} is not in pool {pool} (token0={token0}, token1={token1})"
                )
        if addresses_equal(token_in, token_out):
            raise PoolMembershipError(f"Input and output token are the same: {token_in}")
