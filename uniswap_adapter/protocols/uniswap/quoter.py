"""
Uniswap V3 Quoter commands

Quotes are simulated through eth_call against the Quoter contract. They
reflect pool state at the time of the call and are not binding for a later
swap.
"""

import logging
from typing import Optional, Union

from ...errors import ContractCallFailed, WrongPoolFee
from ...infra.provider import ContractProvider, resolve_provider
from ...types.common import checksum_address
from ...types.fee import FeeTier
from ...types.params import QuoteExactInputSingleParams, QuoteExactOutputSingleParams
from .abi import V3_QUOTER_ABI
from .api import UniswapDeployment, get_deployment
from .encoding import check_uint, fee_to_uint24

logger = logging.getLogger(__name__)


class UniswapV3Quoter:
    """
    Single-pool quotes through the V3 Quoter

    A revert from the quoter (no pool at the fee tier, or no liquidity)
    surfaces as WrongPoolFee.
    """

    def __init__(
        self,
        provider: Union[ContractProvider, str],
        deployment: Optional[UniswapDeployment] = None,
    ):
        self._provider = resolve_provider(provider)
        self._deployment = deployment or get_deployment()

    @property
    def address(self) -> str:
        return self._deployment.require("quoter")

    def _quote(
        self,
        function: str,
        token_in: str,
        token_out: str,
        fee: Union[FeeTier, int],
        amount: int,
        amount_field: str,
        price_limit: int,
    ) -> int:
        token_in = checksum_address(token_in, "token_in")
        token_out = checksum_address(token_out, "token_out")
        fee_value = fee_to_uint24(fee)
        check_uint(amount_field, amount, 256)
        check_uint("sqrt_price_limit_x96", price_limit, 160)
        quoter = self.address

        try:
            result = self._provider.call(
                quoter,
                V3_QUOTER_ABI,
                function,
                token_in,
                token_out,
                fee_value,
                amount,
                price_limit,
            )
        except WrongPoolFee:
            raise
        except ContractCallFailed as e:
            logger.debug(f"{function} failed for {token_in}/{token_out} fee={fee_value}: {e}")
            raise WrongPoolFee.from_call(e, fee_value) from e

        logger.debug(f"{function} {token_in}->{token_out} fee={fee_value} {amount_field}={amount} -> {result}")
        return int(result)

    def quote_exact_input(
        self,
        token_in: str,
        token_out: str,
        fee: Union[FeeTier, int],
        amount_in: int,
        price_limit: int = 0,
    ) -> int:
        """
        Output amount for an exact input amount

        Args:
            token_in: Input token address
            token_out: Output token address
            fee: Pool fee tier
            amount_in: Raw input amount
            price_limit: sqrtPriceLimitX96, 0 for none

        Returns:
            Raw output amount

        Raises:
            InvalidAddressFormat: Bad token address
            ValueOutOfRange: amount_in or price_limit out of range
            WrongPoolFee: No usable pool at this fee tier
            ProviderUnavailable: Endpoint unreachable
            OperationNotSupported: No quoter on this chain
        """
        return self._quote(
            "quoteExactInputSingle",
            token_in, token_out, fee, amount_in, "amount_in", price_limit,
        )

    def quote_exact_output(
        self,
        token_in: str,
        token_out: str,
        fee: Union[FeeTier, int],
        amount_out: int,
        price_limit: int = 0,
    ) -> int:
        """Input amount required for an exact output amount"""
        return self._quote(
            "quoteExactOutputSingle",
            token_in, token_out, fee, amount_out, "amount_out", price_limit,
        )

    def quote_exact_input_single(self, params: QuoteExactInputSingleParams) -> int:
        return self.quote_exact_input(
            params.token_in,
            params.token_out,
            params.fee,
            params.amount_in,
            params.sqrt_price_limit_x96,
        )

    def quote_exact_output_single(self, params: QuoteExactOutputSingleParams) -> int:
        return self.quote_exact_output(
            params.token_in,
            params.token_out,
            params.fee,
            params.amount_out,
            params.sqrt_price_limit_x96,
        )


def quote_exact_input(
    token_in: str,
    token_out: str,
    fee: Union[FeeTier, int],
    amount_in: int,
    price_limit: int,
    provider: Union[ContractProvider, str],
    chain_id: int = 1,
) -> int:
    """Functional form of UniswapV3Quoter.quote_exact_input"""
    quoter = UniswapV3Quoter(provider, get_deployment(chain_id))
    return quoter.quote_exact_input(token_in, token_out, fee, amount_in, price_limit)


def quote_exact_output(
    token_in: str,
    token_out: str,
    fee: Union[FeeTier, int],
    amount_out: int,
    price_limit: int,
    provider: Union[ContractProvider, str],
    chain_id: int = 1,
) -> int:
    """Functional form of UniswapV3Quoter.quote_exact_output"""
    quoter = UniswapV3Quoter(provider, get_deployment(chain_id))
    return quoter.quote_exact_output(token_in, token_out, fee, amount_out, price_limit)
