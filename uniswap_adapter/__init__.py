"""
Uniswap Adapter - thin command wrappers for Uniswap V3 contracts

Provides:
- Amount conversion between UI and fixed-point token amounts
- ERC-20 token metadata (Token)
- Factory pool lookup, Quoter quotes, SwapRouter transaction building
- A swap dispatcher over chain, direction and protocol version

Transactions are returned unsigned; signing and broadcast are left to the caller.
"""

__version__ = "0.1.0"

from .types import (
    Token,
    FeeTier,
    HumanAmount,
    to_fixed_point,
    to_human_amount,
    QuoteExactInputSingleParams,
    QuoteExactOutputSingleParams,
    ExactInputSingleParams,
    ExactOutputSingleParams,
    SwapParams,
)
from .errors import (
    UniswapAdapterError,
    InvalidAddressFormat,
    ProviderUnavailable,
    ContractCallFailed,
    WrongPoolFee,
    ValueOutOfRange,
    AmountOverflow,
    ConfigurationError,
    OperationNotSupported,
    ErrorCode,
)
from .infra import ContractProvider, Web3Provider, create_web3
from .protocols.uniswap import (
    UniswapDeployment,
    get_deployment,
    UniswapV3Factory,
    UniswapV3Quoter,
    UniswapV3Router,
    get_pool_address,
    quote_exact_input,
    quote_exact_output,
)
from .modules.swap import Chain, SwapDirection, SwapModule, UniswapVersion, swap
from .config import setup_logging, enable_file_logging

__all__ = [
    "__version__",
    # Types
    "Token",
    "FeeTier",
    "HumanAmount",
    "to_fixed_point",
    "to_human_amount",
    "QuoteExactInputSingleParams",
    "QuoteExactOutputSingleParams",
    "ExactInputSingleParams",
    "ExactOutputSingleParams",
    "SwapParams",
    # Errors
    "UniswapAdapterError",
    "InvalidAddressFormat",
    "ProviderUnavailable",
    "ContractCallFailed",
    "WrongPoolFee",
    "ValueOutOfRange",
    "AmountOverflow",
    "ConfigurationError",
    "OperationNotSupported",
    "ErrorCode",
    # Infrastructure
    "ContractProvider",
    "Web3Provider",
    "create_web3",
    # Contracts
    "UniswapDeployment",
    "get_deployment",
    "UniswapV3Factory",
    "UniswapV3Quoter",
    "UniswapV3Router",
    "get_pool_address",
    "quote_exact_input",
    "quote_exact_output",
    # Swap
    "Chain",
    "SwapDirection",
    "SwapModule",
    "UniswapVersion",
    "swap",
    # Logging
    "setup_logging",
    "enable_file_logging",
]
