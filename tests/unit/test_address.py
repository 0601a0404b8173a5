"""
Unit tests for address validation and comparison.
"""

import pytest

import univ2_quote.core as core
from univ2_quote.core.address import AddressError, addresses_equal, normalize_address, validate_address

WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"


def test_validate_checksummed_address():
    assert validate_address(WETH) is True


@pytest.mark.parametrize("bad", ["C02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", "0x1234", "0x" + "zz" * 20, WETH + "00"])
def test_validate_rejects_malformed(bad):
    with pytest.raises(AddressError):
        validate_address(bad)


def test_normalize_lowercases():
    assert normalize_address(WETH) == WETH.lower()


def test_addresses_equal_ignores_case():
    assert addresses_equal(WETH, WETH.lower())
    assert not addresses_equal(WETH, "0x" + "00" * 20)


def test_core_exports_only_raising_validator():
    assert "validate_address" in core.__all__
    assert not hasattr(core, "is_valid_address")
