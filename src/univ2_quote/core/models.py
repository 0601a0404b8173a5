"""
Core data models for Uniswap V2 quoting.
All token amounts are raw integer base units internally; Decimal is used
only at the human-facing edges.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from univ2_quote.core.units import to_readable

UNKNOWN_SYMBOL = "UNKNOWN"


class TokenInfo(BaseModel):
    """An ERC-20 token as seen from a pool."""
    model_config = ConfigDict(frozen=True)

    address: str
    decimals: int = Field(ge=0, le=255)
    symbol: str = UNKNOWN_SYMBOL
    balance: int = Field(default=0, ge=0)  # held by the pool contract

    @property
    def readable_balance(self) -> Decimal:
        """Human-readable balance adjusted for decimals."""
        return to_readable(self.balance, self.decimals)


class PoolReserves(BaseModel):
    """Result of getReserves() on a pair, in token0/token1 order."""
    model_config = ConfigDict(frozen=True)

    reserve0: int = Field(ge=0)
    reserve1: int = Field(ge=0)
    block_timestamp_last: int = Field(default=0, ge=0, le=2**32 - 1)


class FeeRate(BaseModel):
    """
    Share of the input amount kept after the LP fee, as an exact fraction.

    997/1000 means a 0.3% fee.
    """
    model_config = ConfigDict(frozen=True)

    numerator: int
    denominator: int

    @model_validator(mode="after")
    def _check_bounds(self) -> FeeRate:
        if not 0 < self.numerator <= self.denominator:
            raise ValueError(
                f"fee numerator must satisfy 0 < numerator <= denominator, "
                f"got {self.numerator}/{self.denominator}"
            )
        return self

    @property
    def fee_pct(self) -> Decimal:
        """Fee charged on the input leg, in percent."""
        kept = Decimal(self.numerator) / Decimal(self.denominator)
        return (1 - kept) * 100


UNISWAP_V2_FEE = FeeRate(numerator=997, denominator=1000)


class SwapQuote(BaseModel):
    """An exact-input swap quote against a single pool."""
    model_config = ConfigDict(frozen=True)

    pool_address: str
    token_in: TokenInfo
    token_out: TokenInfo
    amount_in: Decimal
    amount_in_raw: int
    amount_out_raw: int
    amount_out: Decimal
    token_in_is_token0: bool
    reserves: PoolReserves
    fee: FeeRate = UNISWAP_V2_FEE
    price_impact_pct: Decimal = Decimal(0)

    @property
    def output_symbol(self) -> str:
        return self.token_out.symbol
