"""
Integration tests against a live Ethereum mainnet endpoint.

Run:  ALCHEMY_API_KEY=... pytest tests/integration/ -v -m integration
"""

from decimal import Decimal

import pytest

from univ2_quote.cli.inputs import (
    DEFAULT_INPUT_TOKEN_ADDRESS,
    DEFAULT_OUTPUT_TOKEN_ADDRESS,
    DEFAULT_POOL_ADDRESS,
)
from univ2_quote.core.config import ConfigError, QuoteConfig
from univ2_quote.core.rpc import EthereumRPC
from univ2_quote.defi.uniswap_v2 import PoolStateReader, UniswapV2Quoter, get_amount_out, order_reserves


@pytest.fixture(scope="module")
def rpc():
    try:
        config = QuoteConfig.from_env(timeout=30.0)
    except ConfigError as e:
        pytest.skip(str(e))
    r = EthereumRPC(config.rpc_url, timeout=config.timeout)
    yield r
    r.close()


@pytest.mark.integration
class TestMainnetWethUsdt:
    """Quote WETH -> USDT on the canonical V2 pair."""

    def test_pair_metadata(self, rpc):
        reader = PoolStateReader(rpc)
        assert reader.get_token0(DEFAULT_POOL_ADDRESS) == DEFAULT_INPUT_TOKEN_ADDRESS
        assert reader.get_token1(DEFAULT_POOL_ADDRESS) == DEFAULT_OUTPUT_TOKEN_ADDRESS
        weth = reader.get_token_info(DEFAULT_INPUT_TOKEN_ADDRESS, holder=DEFAULT_POOL_ADDRESS)
        usdt = reader.get_token_info(DEFAULT_OUTPUT_TOKEN_ADDRESS, holder=DEFAULT_POOL_ADDRESS)
        assert (weth.symbol, weth.decimals) == ("WETH", 18)
        assert (usdt.symbol, usdt.decimals) == ("USDT", 6)

    def test_quote_matches_formula_on_fetched_reserves(self, rpc):
        quoter = UniswapV2Quoter(PoolStateReader(rpc))
        quote = quoter.get_quote(
            DEFAULT_POOL_ADDRESS,
            DEFAULT_INPUT_TOKEN_ADDRESS,
            DEFAULT_OUTPUT_TOKEN_ADDRESS,
            Decimal("1"),
        )
        assert quote.token_in_is_token0 is True
        assert quote.amount_in_raw == 10**18
        reserve_in, reserve_out = order_reserves(
            DEFAULT_INPUT_TOKEN_ADDRESS, DEFAULT_INPUT_TOKEN_ADDRESS, quote.reserves
        )
        assert quote.amount_out_raw == get_amount_out(reserve_in, reserve_out, 10**18)
        assert 0 < quote.amount_out_raw < quote.reserves.reserve1
