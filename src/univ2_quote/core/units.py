"""
Conversions between human-readable decimal amounts and raw token base units.

ERC-20 balances are integers scaled by 10**decimals. Going from a decimal
amount to raw units must never round up: the pair contract only ever sees
whole base units, so any remainder below one unit is dropped.

Both directions work on the Decimal digit tuple with plain int arithmetic.
Decimal's context precision (28 digits by default) would otherwise silently
round large 18-decimal amounts.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, localcontext

MAX_DECIMALS = 255


def _check_decimals(decimals: int) -> None:
    if not 0 <= decimals <= MAX_DECIMALS:
        raise ValueError(f"decimals must be in [0, {MAX_DECIMALS}], got {decimals}")


def to_raw(amount: Decimal, decimals: int) -> int:
    """
    Convert a human amount into raw base units, truncating.

    Args:
        amount: non-negative, finite decimal amount (e.g. Decimal("1.3"))
        decimals: token decimals in [0, 255]

    Returns:
        int: floor(amount * 10**decimals)

    Raises:
        ValueError: on negative or non-finite amounts, or decimals out of range
    """
    _check_decimals(decimals)
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {amount}")
    if amount < 0:
        raise ValueError(f"Amount must be non-negative, got {amount}")

    _, digits, exponent = amount.as_tuple()
    coefficient = int("".join(map(str, digits))) if digits else 0
    shift = exponent + decimals
    if shift >= 0:
        return coefficient * 10 ** shift
    return coefficient // 10 ** (-shift)


def to_readable(raw: int, decimals: int) -> Decimal:
    """Return raw / 10**decimals as an exact Decimal (display only)."""
    _check_decimals(decimals)
    if raw < 0:
        raise ValueError(f"Raw amount must be non-negative, got {raw}")
    digits = tuple(int(d) for d in str(raw))
    return Decimal((0, digits, -decimals))


def format_amount(amount: Decimal, places: int = 6) -> str:
    """Fixed-point display string, e.g. format_amount(Decimal("1.5")) -> '1.500000'."""
    with localcontext() as ctx:
        ctx.prec = max(max(amount.adjusted() + 1, 1) + places + 2, ctx.prec)
        quantized = amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)
    return f"{quantized:f}"
