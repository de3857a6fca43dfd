"""
Functional modules for Uniswap Adapter

Provides high-level operations:
- SwapModule: per-chain swap transaction building and quotes
- swap: stateless swap dispatcher
"""

from .swap import (
    Chain,
    SwapDirection,
    SwapModule,
    UniswapVersion,
    default_deadline,
    swap,
)

__all__ = [
    "SwapModule",
    "swap",
    "default_deadline",
    # Enums
    "Chain",
    "SwapDirection",
    "UniswapVersion",
]
