"""
Uniswap V3 Factory commands
"""

import logging
from typing import Optional, Union

from ...infra.provider import ContractProvider, resolve_provider
from ...errors import WrongPoolFee
from ...types.common import ZERO_ADDRESS, checksum_address
from ...types.fee import FeeTier
from .abi import V3_FACTORY_ABI
from .api import UniswapDeployment, get_deployment
from .encoding import fee_to_uint24

logger = logging.getLogger(__name__)


class UniswapV3Factory:
    """
    Read-only access to the V3 factory pool registry

    Usage:
        factory = UniswapV3Factory(Web3Provider("https://eth.llamarpc.com"))
        pool = factory.get_pool_address(weth, token, FeeTier.FEE_10000)
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
        return self._deployment.require("factory")

    @property
    def deployment(self) -> UniswapDeployment:
        return self._deployment

    def get_pool_address(
        self,
        token_a: str,
        token_b: str,
        fee: Union[FeeTier, int],
    ) -> str:
        """
        Look up the pool for a token pair at a fee tier

        Token order does not matter; the factory sorts the pair.

        Returns:
            Checksummed pool address

        Raises:
            InvalidAddressFormat: Bad token address
            WrongPoolFee: No pool exists for the pair at this fee
            ContractCallFailed: Factory call reverted
            ProviderUnavailable: Endpoint unreachable
        """
        token_a = checksum_address(token_a, "token_a")
        token_b = checksum_address(token_b, "token_b")
        fee_value = fee_to_uint24(fee)

        pool_address = self._provider.call(
            self.address,
            V3_FACTORY_ABI,
            "getPool",
            token_a,
            token_b,
            fee_value,
        )

        if not pool_address or pool_address == ZERO_ADDRESS:
            logger.debug(f"No V3 pool for {token_a}/{token_b} fee={fee_value}")
            raise WrongPoolFee.no_pool(token_a, token_b, fee_value)

        pool_address = checksum_address(pool_address, "pool address")
        logger.debug(f"V3 pool {pool_address} for {token_a}/{token_b} fee={fee_value}")
        return pool_address


def get_pool_address(
    token_a: str,
    token_b: str,
    fee: Union[FeeTier, int],
    provider: Union[ContractProvider, str],
    chain_id: int = 1,
) -> str:
    """Functional form of UniswapV3Factory.get_pool_address"""
    factory = UniswapV3Factory(provider, get_deployment(chain_id))
    return factory.get_pool_address(token_a, token_b, fee)
