"""
Unit tests for the V3 quoter command (fake provider)
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from web3.exceptions import Web3RPCError

# Add project root and this directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from fakes import QUOTER, TOKEN, WETH, FakeProvider, reverted
from uniswap_adapter.errors import (
    ContractCallFailed,
    ErrorCode,
    InvalidAddressFormat,
    OperationNotSupported,
    ProviderUnavailable,
    ValueOutOfRange,
    WrongPoolFee,
)
from uniswap_adapter.infra.provider import Web3Provider
from uniswap_adapter.protocols.uniswap.api import UniswapDeployment
from uniswap_adapter.protocols.uniswap.quoter import (
    UniswapV3Quoter,
    quote_exact_input,
    quote_exact_output,
)
from uniswap_adapter.types.fee import FeeTier
from uniswap_adapter.types.params import (
    QuoteExactInputSingleParams,
    QuoteExactOutputSingleParams,
)

MAINNET = UniswapDeployment(chain_id=1, quoter=QUOTER)
ONE_CENT_ETH = 10**16


class TestQuoteExactInput:
    """Tests for quoteExactInputSingle"""

    def test_returns_amount_out(self):
        provider = FakeProvider(responses={"quoteExactInputSingle": 123_456_789})
        quoter = UniswapV3Quoter(provider, MAINNET)

        amount_out = quoter.quote_exact_input(WETH, TOKEN, FeeTier.FEE_10000, ONE_CENT_ETH)

        assert amount_out == 123_456_789
        address, function, args, _ = provider.calls[0]
        assert address == QUOTER
        assert function == "quoteExactInputSingle"
        assert args == (WETH, TOKEN, 10000, ONE_CENT_ETH, 0)

    def test_params_form(self):
        provider = FakeProvider(responses={"quoteExactInputSingle": 5})
        quoter = UniswapV3Quoter(provider, MAINNET)

        params = QuoteExactInputSingleParams(
            token_in=WETH,
            token_out=TOKEN,
            fee=FeeTier.FEE_3000,
            amount_in=ONE_CENT_ETH,
            sqrt_price_limit_x96=2**96,
        )

        assert quoter.quote_exact_input_single(params) == 5
        assert provider.calls[0][2] == (WETH, TOKEN, 3000, ONE_CENT_ETH, 2**96)

    def test_revert_is_wrong_pool_fee(self):
        """A pair/fee with no pool yields WrongPoolFee, never a zero quote"""
        provider = FakeProvider(errors={
            "quoteExactInputSingle": reverted(QUOTER, "quoteExactInputSingle"),
        })
        quoter = UniswapV3Quoter(provider, MAINNET)

        with pytest.raises(WrongPoolFee) as exc_info:
            quoter.quote_exact_input(WETH, TOKEN, FeeTier.FEE_100, ONE_CENT_ETH)

        assert exc_info.value.fee == 100
        assert isinstance(exc_info.value.original_error, ContractCallFailed)

    def test_provider_unavailable_propagates(self):
        provider = FakeProvider(errors={
            "quoteExactInputSingle": ProviderUnavailable.timeout("fake://provider", 30.0),
        })
        quoter = UniswapV3Quoter(provider, MAINNET)

        with pytest.raises(ProviderUnavailable):
            quoter.quote_exact_input(WETH, TOKEN, FeeTier.FEE_3000, ONE_CENT_ETH)

    def test_rate_limited_endpoint_is_not_a_fee_error(self):
        web3 = MagicMock()
        quote_fn = web3.eth.contract.return_value.functions.quoteExactInputSingle
        quote_fn.return_value.call.side_effect = Web3RPCError(
            "Request rejected",
            rpc_response={"jsonrpc": "2.0", "id": 1, "error": {"code": -32005, "message": "Request rejected"}},
        )
        quoter = UniswapV3Quoter(Web3Provider("https://rpc.example.com", web3=web3), MAINNET)

        with pytest.raises(ProviderUnavailable) as exc_info:
            quoter.quote_exact_input(WETH, TOKEN, FeeTier.FEE_3000, ONE_CENT_ETH)
        assert not isinstance(exc_info.value, WrongPoolFee)
        assert exc_info.value.code == ErrorCode.RPC_RATE_LIMITED
        assert exc_info.value.should_retry


class TestQuoteExactOutput:
    """Tests for quoteExactOutputSingle"""

    def test_returns_amount_in(self):
        provider = FakeProvider(responses={"quoteExactOutputSingle": 987})
        quoter = UniswapV3Quoter(provider, MAINNET)

        assert quoter.quote_exact_output(WETH, TOKEN, FeeTier.FEE_500, 10**18) == 987
        assert provider.calls[0][1] == "quoteExactOutputSingle"
        assert provider.calls[0][2] == (WETH, TOKEN, 500, 10**18, 0)

    def test_params_form(self):
        provider = FakeProvider(responses={"quoteExactOutputSingle": 42})
        quoter = UniswapV3Quoter(provider, MAINNET)

        params = QuoteExactOutputSingleParams(
            token_in=WETH, token_out=TOKEN, fee=FeeTier.FEE_10000, amount_out=1000,
        )
        assert quoter.quote_exact_output_single(params) == 42

    def test_revert_is_wrong_pool_fee(self):
        provider = FakeProvider(errors={
            "quoteExactOutputSingle": reverted(QUOTER, "quoteExactOutputSingle"),
        })
        quoter = UniswapV3Quoter(provider, MAINNET)

        with pytest.raises(WrongPoolFee):
            quoter.quote_exact_output(WETH, TOKEN, FeeTier.FEE_100, 1000)


class TestQuoteValidation:
    """Arguments are checked before any call is made"""

    @pytest.mark.parametrize("kwargs, error", [
        ({"amount_in": -1}, ValueOutOfRange),
        ({"amount_in": 2**256}, ValueOutOfRange),
        ({"amount_in": 1.5}, ValueOutOfRange),
        ({"price_limit": 2**160}, ValueOutOfRange),
        ({"price_limit": -1}, ValueOutOfRange),
        ({"fee": 2**24}, WrongPoolFee),
        ({"fee": "3000"}, WrongPoolFee),
        ({"token_in": "0x1234"}, InvalidAddressFormat),
        ({"token_out": "weth"}, InvalidAddressFormat),
    ])
    def test_rejected(self, kwargs, error):
        provider = FakeProvider(responses={"quoteExactInputSingle": 1})
        quoter = UniswapV3Quoter(provider, MAINNET)
        call_kwargs = {
            "token_in": WETH,
            "token_out": TOKEN,
            "fee": FeeTier.FEE_3000,
            "amount_in": ONE_CENT_ETH,
            "price_limit": 0,
        }
        call_kwargs.update(kwargs)

        with pytest.raises(error):
            quoter.quote_exact_input(**call_kwargs)
        assert provider.calls == []

    def test_price_limit_uint160_max_accepted(self):
        provider = FakeProvider(responses={"quoteExactInputSingle": 1})
        quoter = UniswapV3Quoter(provider, MAINNET)

        quoter.quote_exact_input(WETH, TOKEN, FeeTier.FEE_3000, 1, 2**160 - 1)
        assert provider.calls[0][2][4] == 2**160 - 1

    def test_raw_fee_value_passes_through(self):
        """Non-enumerated fees reach the chain, which decides"""
        provider = FakeProvider(responses={"quoteExactInputSingle": 1})
        quoter = UniswapV3Quoter(provider, MAINNET)

        quoter.quote_exact_input(WETH, TOKEN, 2500, 1)
        assert provider.calls[0][2][2] == 2500


def test_no_quoter_on_chain():
    quoter = UniswapV3Quoter(FakeProvider(), UniswapDeployment(chain_id=8453))
    with pytest.raises(OperationNotSupported):
        quoter.quote_exact_input(WETH, TOKEN, FeeTier.FEE_3000, 1)


def test_functional_forms():
    provider = FakeProvider(responses={
        "quoteExactInputSingle": 11,
        "quoteExactOutputSingle": 22,
    })

    assert quote_exact_input(WETH, TOKEN, FeeTier.FEE_10000, 100, 0, provider) == 11
    assert quote_exact_output(WETH, TOKEN, FeeTier.FEE_10000, 100, 0, provider) == 22
    assert all(call[0] == QUOTER for call in provider.calls)

    with pytest.raises(OperationNotSupported):
        quote_exact_input(WETH, TOKEN, FeeTier.FEE_10000, 100, 0, provider, chain_id=8453)
