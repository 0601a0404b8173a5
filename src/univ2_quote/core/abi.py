"""
ABI helpers for the handful of read-only calls a Uniswap V2 quote needs.

Call data is the 4-byte selector followed by ABI-encoded arguments. Return
values come back as 32-byte big-endian slots; the fixed-layout ones are read
straight from the slots rather than through a full ABI decoder.

Reference: https://docs.soliditylang.org/en/latest/abi-spec.html
"""

from __future__ import annotations

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError as ABIDecodingError
from eth_utils import function_signature_to_4byte_selector, to_checksum_address

SLOT_SIZE = 32

GET_RESERVES = "getReserves()"
TOKEN0 = "token0()"
TOKEN1 = "token1()"
BALANCE_OF = "balanceOf(address)"
DECIMALS = "decimals()"
SYMBOL = "symbol()"


class DecodingError(Exception):
    """Raised when a call result does not have the expected layout."""
    pass


def selector(signature: str) -> bytes:
    """Return the 4-byte function selector for a canonical signature."""
    return function_signature_to_4byte_selector(signature)


def encode_call(signature: str, arg_types: list[str] | None = None, args: list | None = None) -> bytes:
    """
    Build call data for `signature`.

    Address arguments are checksummed first; eth_abi rejects
    mixed-case addresses with a bad checksum.
    """
    arg_types = arg_types or []
    args = list(args or [])
    for i, arg_type in enumerate(arg_types):
        if arg_type == "address":
            args[i] = to_checksum_address(args[i])
    return selector(signature) + (encode(arg_types, args) if arg_types else b"")


def _require(data: bytes, size: int, what: str) -> None:
    if len(data) < size:
        raise DecodingError(f"insufficient data for {what}: {len(data)} bytes, need {size}")


def _slot(data: bytes, index: int) -> bytes:
    return data[index * SLOT_SIZE:(index + 1) * SLOT_SIZE]


def decode_reserves(data: bytes) -> tuple[int, int, int]:
    """
    Decode getReserves() -> (uint112 reserve0, uint112 reserve1, uint32 blockTimestampLast).

    The uint32 timestamp occupies the low 4 bytes of its slot.
    """
    _require(data, 3 * SLOT_SIZE, "reserves")
    reserve0 = int.from_bytes(_slot(data, 0), "big")
    reserve1 = int.from_bytes(_slot(data, 1), "big")
    timestamp = int.from_bytes(_slot(data, 2)[-4:], "big")
    return reserve0, reserve1, timestamp


def decode_uint256(data: bytes) -> int:
    _require(data, SLOT_SIZE, "uint256")
    return int.from_bytes(_slot(data, 0), "big")


def decode_uint8(data: bytes) -> int:
    _require(data, SLOT_SIZE, "uint8")
    return data[SLOT_SIZE - 1]


def decode_address(data: bytes) -> str:
    """Decode an address return value into lowercase 0x hex."""
    _require(data, SLOT_SIZE, "address")
    return "0x" + data[12:SLOT_SIZE].hex()


def decode_string(data: bytes) -> str:
    """
    Decode a string return value such as symbol().

    Falls back to reading the length word and payload by hand when the
    standard decoder rejects the data, and to a null-padded bytes32 for
    tokens that predate the string return type.
    """
    try:
        (value,) = decode(["string"], data)
        return value
    except (ABIDecodingError, UnicodeDecodeError, OverflowError) as e:
        error = e

    if len(data) >= 3 * SLOT_SIZE:
        length = int.from_bytes(_slot(data, 1), "big")
        if 0 < length <= len(data) - 2 * SLOT_SIZE:
            return data[2 * SLOT_SIZE:2 * SLOT_SIZE + length].decode("utf-8", errors="replace")
    elif len(data) == SLOT_SIZE:
        raw = data.rstrip(b"\x00")
        if raw:
            return raw.decode("utf-8", errors="replace")

    raise DecodingError(f"failed to decode string: {error}")
