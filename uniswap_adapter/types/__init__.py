"""
Type definitions for Uniswap Adapter
"""

from .amounts import (
    HumanAmount,
    UINT256_MAX,
    to_fixed_point,
    to_human_amount,
)
from .common import Token, ZERO_ADDRESS, checksum_address
from .fee import FeeTier, TICK_SPACING_BY_FEE
from .params import (
    QuoteExactInputSingleParams,
    QuoteExactOutputSingleParams,
    ExactInputSingleParams,
    ExactOutputSingleParams,
    SwapParams,
)

__all__ = [
    # Amounts
    "HumanAmount",
    "UINT256_MAX",
    "to_fixed_point",
    "to_human_amount",
    # Tokens
    "Token",
    "ZERO_ADDRESS",
    "checksum_address",
    # Fees
    "FeeTier",
    "TICK_SPACING_BY_FEE",
    # Params
    "QuoteExactInputSingleParams",
    "QuoteExactOutputSingleParams",
    "ExactInputSingleParams",
    "ExactOutputSingleParams",
    "SwapParams",
]
