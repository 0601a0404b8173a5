"""
Parsing of the four values the CLI prompts for.

Pure functions: each takes the raw text the user typed (None on EOF) plus a
default, and returns a ParseResult. The interactive loop in cli.main decides
whether to re-prompt.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Generic, TypeVar

from univ2_quote.core.address import AddressError, has_hex_prefix, validate_address

T = TypeVar("T")

# Selling 1 WETH for USDT on the canonical mainnet pair
DEFAULT_POOL_ADDRESS = "0x0d4a11d5eeaac28ec3f61d100daf4d40471f1852"
DEFAULT_INPUT_TOKEN_ADDRESS = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
DEFAULT_OUTPUT_TOKEN_ADDRESS = "0xdac17f958d2ee523a2206206994597c13d831ec7"
DEFAULT_INPUT_AMOUNT = "1"


class InputValidationError(Exception):
    """A prompt answer that cannot be used; the user is asked again."""
    pass


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    value: T | None = None
    error: InputValidationError | None = None
    used_default: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class QuoteRequest:
    pool_address: str
    input_token_address: str
    output_token_address: str
    input_amount: Decimal


def _is_blank(raw: str | None) -> bool:
    return raw is None or not raw.strip()


def parse_address(raw: str | None, default: str) -> ParseResult[str]:
    """Accept a 0x hex address; blank input or EOF selects the default."""
    if _is_blank(raw):
        return ParseResult(value=default, used_default=True)

    text = raw.strip()
    if not has_hex_prefix(text):
        return ParseResult(error=InputValidationError("Address must start with 0x"))
    try:
        validate_address(text)
    except AddressError as e:
        return ParseResult(error=InputValidationError(str(e)))
    return ParseResult(value=text)


def parse_amount(raw: str | None, default: str) -> ParseResult[Decimal]:
    """Accept a finite, non-negative decimal; blank input or EOF selects the default."""
    used_default = _is_blank(raw)
    text = default if used_default else raw.strip()

    try:
        amount = Decimal(text)
    except InvalidOperation:
        return ParseResult(
            error=InputValidationError("Invalid number. Please enter a valid decimal number"),
            used_default=used_default,
        )
    if not amount.is_finite():
        return ParseResult(
            error=InputValidationError("Amount must be a finite number"),
            used_default=used_default,
        )
    if amount < 0:
        return ParseResult(
            error=InputValidationError("Amount must not be negative"),
            used_default=used_default,
        )
    return ParseResult(value=amount, used_default=used_default)
