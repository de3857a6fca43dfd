"""
Uniswap Contract Addresses and Deployments

Per-chain addresses for the Uniswap V3 factory, Quoter (V1 interface) and
SwapRouter (V1 interface, with deadline in the params struct).
"""

from dataclasses import dataclass, replace
from typing import Optional

from ...config import UniswapConfig, get_config
from ...errors import ConfigurationError, OperationNotSupported
from ...types.common import checksum_address

# =========================================================================
# Uniswap V3 Contracts
# =========================================================================

UNISWAP_V3_FACTORY_ADDRESSES = {
    1: "0x1F98431c8aD98523631AE4a59f267346ea31F984",      # Ethereum Mainnet
    8453: "0x33128a8fC17869897dcE68Ed026d694621f6FDfD",   # Base
}

# Quoter V1; Base only ships QuoterV2 (struct params), which this ABI does not match
UNISWAP_V3_QUOTER_ADDRESSES = {
    1: "0xb27308f9F90D607463bb33eA1BeBb41C27CE5AB6",      # Ethereum Mainnet
}

# SwapRouter V1; Base only ships SwapRouter02 (no deadline field)
UNISWAP_V3_ROUTER_ADDRESSES = {
    1: "0xE592427A0AEce92De3Edee1F18E0157C05861564",      # Ethereum Mainnet
}

CHAIN_NAMES = {
    1: "Ethereum",
    8453: "Base",
}

UNISWAP_SUPPORTED_CHAINS = sorted(UNISWAP_V3_FACTORY_ADDRESSES)


@dataclass(frozen=True)
class UniswapDeployment:
    """
    Contract addresses for one chain

    A None address means no compatible contract is deployed there.
    """
    chain_id: int
    factory: Optional[str] = None
    quoter: Optional[str] = None
    router: Optional[str] = None

    def __post_init__(self):
        for name in ("factory", "quoter", "router"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, checksum_address(value, f"{name} address"))

    @property
    def chain_name(self) -> str:
        return CHAIN_NAMES.get(self.chain_id, f"Chain-{self.chain_id}")

    def require(self, contract: str) -> str:
        """
        Address of a contract on this chain

        Raises:
            OperationNotSupported: If the contract is not deployed here
        """
        address = getattr(self, contract)
        if address is None:
            raise OperationNotSupported(
                f"Uniswap V3 {contract} is not available on {self.chain_name}",
                operation=contract,
                protocol="uniswap_v3",
            )
        return address


def get_deployment(
    chain_id: int = 1,
    uniswap_config: Optional[UniswapConfig] = None,
) -> UniswapDeployment:
    """
    Deployment for a chain, with env overrides applied to Ethereum mainnet

    Raises:
        ConfigurationError: If the chain is unknown
    """
    if chain_id not in UNISWAP_V3_FACTORY_ADDRESSES:
        supported = ", ".join(f"{c} ({CHAIN_NAMES.get(c, 'Unknown')})" for c in UNISWAP_SUPPORTED_CHAINS)
        raise ConfigurationError.invalid(
            "chain_id",
            f"Unsupported chain ID: {chain_id}. Supported: {supported}"
        )

    deployment = UniswapDeployment(
        chain_id=chain_id,
        factory=UNISWAP_V3_FACTORY_ADDRESSES.get(chain_id),
        quoter=UNISWAP_V3_QUOTER_ADDRESSES.get(chain_id),
        router=UNISWAP_V3_ROUTER_ADDRESSES.get(chain_id),
    )

    if uniswap_config is None:
        uniswap_config = get_config().uniswap

    if chain_id == uniswap_config.eth_chain_id:
        overrides = {
            name: value
            for name, value in (
                ("factory", uniswap_config.factory_address),
                ("quoter", uniswap_config.quoter_address),
                ("router", uniswap_config.router_address),
            )
            if value
        }
        if overrides:
            deployment = replace(deployment, **overrides)

    return deployment
