"""
Uniswap V3 contract commands

- Factory: pool address lookup
- Quoter: single-pool exact-input/exact-output quotes
- Router: unsigned single-pool swap transactions
"""

from .api import (
    CHAIN_NAMES,
    UNISWAP_SUPPORTED_CHAINS,
    UniswapDeployment,
    get_deployment,
)
from .factory import UniswapV3Factory, get_pool_address
from .quoter import UniswapV3Quoter, quote_exact_input, quote_exact_output
from .router import (
    UniswapV3Router,
    exact_input_to_tuple,
    exact_output_to_tuple,
)

__all__ = [
    "CHAIN_NAMES",
    "UNISWAP_SUPPORTED_CHAINS",
    "UniswapDeployment",
    "get_deployment",
    "UniswapV3Factory",
    "get_pool_address",
    "UniswapV3Quoter",
    "quote_exact_input",
    "quote_exact_output",
    "UniswapV3Router",
    "exact_input_to_tuple",
    "exact_output_to_tuple",
]
