"""
Swap Module

Dispatches a swap request to the router command for the requested chain,
direction and protocol version:
- V3 exact input: SwapRouter.exactInputSingle
- V3 exact output: SwapRouter.exactOutputSingle
- V2: not supported
"""

import logging
import time
from enum import Enum
from typing import Dict, Optional, Union

from ..config import get_config
from ..errors import ConfigurationError, OperationNotSupported
from ..infra.provider import ContractProvider, Web3Provider, resolve_provider
from ..protocols.uniswap.api import get_deployment
from ..protocols.uniswap.quoter import UniswapV3Quoter
from ..protocols.uniswap.router import TxRequest, UniswapV3Router
from ..types.params import (
    ExactInputSingleParams,
    ExactOutputSingleParams,
    SwapParams,
)

logger = logging.getLogger(__name__)


class Chain(Enum):
    """Supported EVM networks"""
    ETHEREUM = "ethereum"
    BASE = "base"

    @classmethod
    def from_string(cls, value: str) -> "Chain":
        """Convert string to Chain enum (case-insensitive)"""
        value_lower = value.lower()
        if value_lower in ("eth", "ethereum", "mainnet", "1"):
            return cls.ETHEREUM
        elif value_lower in ("base", "8453"):
            return cls.BASE
        else:
            raise ConfigurationError.invalid("chain", f"Unknown chain: {value}. Supported: ethereum, base")

    @property
    def chain_id(self) -> int:
        """EVM chain ID"""
        if self == Chain.BASE:
            return get_config().uniswap.base_chain_id
        return get_config().uniswap.eth_chain_id

    @property
    def rpc_url(self) -> str:
        """Default RPC URL from configuration"""
        if self == Chain.BASE:
            return get_config().uniswap.base_rpc_url
        return get_config().uniswap.eth_rpc_url


class SwapDirection(Enum):
    EXACT_INPUT = "exact_input"
    EXACT_OUTPUT = "exact_output"


class UniswapVersion(Enum):
    V2 = "v2"
    V3 = "v3"


def _resolve_enum(enum_cls, value, name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError as e:
        supported = ", ".join(m.value for m in enum_cls)
        raise ConfigurationError.invalid(name, f"Unknown {name}: {value}. Supported: {supported}") from e


def _resolve_chain(chain: Union[str, Chain]) -> Chain:
    if isinstance(chain, Chain):
        return chain
    return Chain.from_string(str(chain))


def default_deadline() -> int:
    """Unix timestamp EVM_TX_DEADLINE_SECONDS from now"""
    return int(time.time()) + get_config().evm.tx_deadline_seconds


def swap(
    chain: Union[str, Chain],
    direction: Union[str, SwapDirection],
    version: Union[str, UniswapVersion],
    params: SwapParams,
    provider: Union[ContractProvider, str, None] = None,
    sender: Optional[str] = None,
    simulate: bool = False,
) -> TxRequest:
    """
    Build an unsigned swap transaction

    Args:
        chain: Target chain ("ethereum", "base" or Chain enum)
        direction: "exact_input" or "exact_output"
        version: "v3" (V2 is rejected)
        params: Swap request; amount_out is the minimum for exact input,
            amount_in is the maximum for exact output
        provider: ContractProvider or RPC URL (defaults to the chain's configured RPC)
        sender: Optional sender address, set as "from"
        simulate: eth_call the swap before returning

    Returns:
        Unsigned transaction request

    Raises:
        OperationNotSupported: V2 requested, or no router on the chain
        ConfigurationError: Unknown chain, direction or version
    """
    resolved_chain = _resolve_chain(chain)
    resolved_direction = _resolve_enum(SwapDirection, direction, "direction")
    resolved_version = _resolve_enum(UniswapVersion, version, "version")

    if resolved_version == UniswapVersion.V2:
        raise OperationNotSupported.not_implemented(
            f"swap_{resolved_direction.value}", "uniswap_v2"
        )

    deadline = params.deadline if params.deadline is not None else default_deadline()
    router = UniswapV3Router(
        provider if provider is not None else resolved_chain.rpc_url,
        get_deployment(resolved_chain.chain_id),
    )

    logger.info(
        f"Swap {resolved_direction.value} on {resolved_chain.value}: "
        f"{params.token_in} -> {params.token_out} fee={params.pool_fee}"
    )

    if resolved_direction == SwapDirection.EXACT_INPUT:
        return router.exact_input_single(
            ExactInputSingleParams(
                token_in=params.token_in,
                token_out=params.token_out,
                fee=params.pool_fee,
                recipient=params.recipient,
                deadline=deadline,
                amount_in=params.amount_in,
                amount_out_minimum=params.amount_out,
                sqrt_price_limit_x96=params.sqrt_price_limit_x96,
            ),
            sender=sender,
            simulate=simulate,
        )

    return router.exact_output_single(
        ExactOutputSingleParams(
            token_in=params.token_in,
            token_out=params.token_out,
            fee=params.pool_fee,
            recipient=params.recipient,
            deadline=deadline,
            amount_out=params.amount_out,
            amount_in_maximum=params.amount_in,
            sqrt_price_limit_x96=params.sqrt_price_limit_x96,
        ),
        sender=sender,
        simulate=simulate,
    )


class SwapModule:
    """
    Multi-chain Uniswap swap module

    Holds one provider per chain so repeated calls share a connection.

    Usage:
        with SwapModule() as swaps:
            amount_out = swaps.quote(params, chain="ethereum")
            tx = swaps.swap(params, chain="ethereum", direction="exact_input")
    """

    def __init__(self, providers: Optional[Dict[Chain, Union[ContractProvider, str]]] = None):
        """
        Args:
            providers: Optional per-chain providers or RPC URLs; chains not
                listed use the configured RPC URL
        """
        self._providers: Dict[Chain, ContractProvider] = {}
        for chain, provider in (providers or {}).items():
            self._providers[_resolve_chain(chain)] = resolve_provider(provider)

    def _get_provider(self, chain: Chain) -> ContractProvider:
        """Get or create the provider for a chain"""
        if chain not in self._providers:
            self._providers[chain] = Web3Provider(chain.rpc_url)
        return self._providers[chain]

    def quote(
        self,
        params: SwapParams,
        chain: Union[str, Chain] = Chain.ETHEREUM,
        direction: Union[str, SwapDirection] = SwapDirection.EXACT_INPUT,
    ) -> int:
        """
        Quote the complementary amount for a swap request

        Returns:
            Raw amount_out for exact input, raw amount_in for exact output
        """
        resolved_chain = _resolve_chain(chain)
        resolved_direction = _resolve_enum(SwapDirection, direction, "direction")
        quoter = UniswapV3Quoter(
            self._get_provider(resolved_chain),
            get_deployment(resolved_chain.chain_id),
        )

        if resolved_direction == SwapDirection.EXACT_INPUT:
            return quoter.quote_exact_input(
                params.token_in, params.token_out, params.pool_fee,
                params.amount_in, params.sqrt_price_limit_x96,
            )
        return quoter.quote_exact_output(
            params.token_in, params.token_out, params.pool_fee,
            params.amount_out, params.sqrt_price_limit_x96,
        )

    def swap(
        self,
        params: SwapParams,
        chain: Union[str, Chain] = Chain.ETHEREUM,
        direction: Union[str, SwapDirection] = SwapDirection.EXACT_INPUT,
        version: Union[str, UniswapVersion] = UniswapVersion.V3,
        sender: Optional[str] = None,
        simulate: bool = False,
    ) -> TxRequest:
        """Build an unsigned swap transaction (see module-level swap)"""
        resolved_chain = _resolve_chain(chain)
        return swap(
            resolved_chain,
            direction,
            version,
            params,
            provider=self._get_provider(resolved_chain),
            sender=sender,
            simulate=simulate,
        )

    def get_supported_chains(self) -> list:
        """Get list of supported chains"""
        return list(Chain)

    def close(self):
        """Drop cached providers"""
        self._providers.clear()

    def __enter__(self) -> "SwapModule":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
