"""
Ethereum address utilities: validation and comparison.

Addresses are 20 bytes written as "0x" followed by 40 hex digits. Mixed-case
(EIP-55) and lowercase forms name the same account, so comparisons ignore case.
"""

from __future__ import annotations

import re

_HEX_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


class AddressError(Exception):
    """Raised for malformed Ethereum addresses."""

    pass


def has_hex_prefix(value: str) -> bool:
    """Check for the literal "0x" prefix."""
    return value.startswith("0x")


def validate_address(address: str) -> bool:
    """
    Validate a hex address.

    Returns:
        True if valid

    Raises:
        AddressError: if the prefix or the length/hex body is wrong
    """
    if not has_hex_prefix(address):
        raise AddressError(f"Address must start with 0x: {address!r}")
    if not _HEX_ADDRESS_RE.match(address):
        raise AddressError(
            f"Address must be 0x followed by 40 hex digits, got {len(address) - 2} characters: {address!r}"
        )
    return True


def normalize_address(address: str) -> str:
    """Return the lowercase form of a validated address."""
    validate_address(address)
    return address.lower()


def addresses_equal(a: str, b: str) -> bool:
    """Case-insensitive hex address equality."""
    return a.lower() == b.lower()
