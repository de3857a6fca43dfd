"""
Uniswap V3 Contract Integration Tests

Read-only checks against Ethereum mainnet:
- ERC-20 metadata via Token.from_chain
- Factory pool lookup
- Quoter quotes, including a fee tier with no pool
- Router transaction building with an eth_call simulation

Environment Variables Required:
    ETH_RPC_URL - Ethereum RPC endpoint
"""

import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from uniswap_adapter.errors import ContractCallFailed, WrongPoolFee
from uniswap_adapter.modules.swap import Chain, SwapDirection, UniswapVersion, swap
from uniswap_adapter.protocols.uniswap.factory import get_pool_address
from uniswap_adapter.protocols.uniswap.quoter import quote_exact_input, quote_exact_output
from uniswap_adapter.types.amounts import to_fixed_point
from uniswap_adapter.types.common import Token
from uniswap_adapter.types.fee import FeeTier
from uniswap_adapter.types.params import SwapParams

pytestmark = pytest.mark.live

WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
TOKEN = "0x535887989b9EdffB63b1Fd5C6b99a4d45443b49a"
TOKEN_WETH_POOL = "0xFbDbaC2d456A3CC2754A626C2fB83C1af25A3a6F"
TURBO = "0xA35923162C49cF95e6BF26623385eb431ad920D3"
RECEIVER = "0xCa017e24f449Ec454E94C843bbbF2cE61b7F6B69"


def test_token_from_chain(provider):
    print("\nReading Turbo metadata...")

    token = Token.from_chain(TURBO, provider)

    print(f"  {token!r}")
    assert token.name == "Turbo"
    assert token.decimals == 18


def test_token_from_chain_not_a_token(provider):
    """An EOA has no code; decoding the empty result fails"""
    with pytest.raises(ContractCallFailed):
        Token.from_chain(RECEIVER, provider)


def test_get_pool_address(provider):
    pool = get_pool_address(WETH, TOKEN, FeeTier.FEE_10000, provider)

    print(f"\n  pool: {pool}")
    assert pool == TOKEN_WETH_POOL

    # token order does not matter
    assert get_pool_address(TOKEN, WETH, FeeTier.FEE_10000, provider) == pool


def test_get_pool_address_missing_tier(provider):
    with pytest.raises(WrongPoolFee):
        get_pool_address(WETH, TOKEN, FeeTier.FEE_100, provider)


def test_quotes(provider):
    amount_in = to_fixed_point(Decimal("0.01"), 18)

    amount_out = quote_exact_input(WETH, TOKEN, FeeTier.FEE_10000, amount_in, 0, provider)
    print(f"\n  0.01 WETH -> {amount_out} raw")
    assert amount_out > 0

    needed = quote_exact_output(WETH, TOKEN, FeeTier.FEE_10000, amount_out, 0, provider)
    print(f"  {amount_out} raw <- {needed} WETH wei")
    assert needed > 0


def test_quote_wrong_fee(provider):
    """No FEE_100 pool exists for the pair; the quote reverts"""
    with pytest.raises(WrongPoolFee):
        quote_exact_input(WETH, TOKEN, FeeTier.FEE_100, 10**16, 0, provider)


def test_swap_transaction(provider):
    params = SwapParams(
        token_in=WETH,
        token_out=TOKEN,
        amount_in=to_fixed_point(Decimal("0.01"), 18),
        amount_out=0,
        pool_fee=FeeTier.FEE_10000,
        recipient=RECEIVER,
    )

    tx = swap(Chain.ETHEREUM, SwapDirection.EXACT_INPUT, UniswapVersion.V3, params, provider)

    print(f"\n  tx to={tx['to']} data={tx['data'][:10]}...")
    assert tx["chainId"] == 1
    assert tx["data"].startswith("0x414bf389")
