"""
Parameter types for quoter and router calls

All amounts are fixed-point integers (see types.amounts). Tokens are
referenced by address only.
"""

from dataclasses import dataclass
from typing import Optional

from .fee import FeeTier


@dataclass(frozen=True)
class QuoteExactInputSingleParams:
    """Quote the output for a fixed input amount through one pool"""
    token_in: str
    token_out: str
    fee: FeeTier
    amount_in: int
    sqrt_price_limit_x96: int = 0


@dataclass(frozen=True)
class QuoteExactOutputSingleParams:
    """Quote the input needed for a fixed output amount through one pool"""
    token_in: str
    token_out: str
    fee: FeeTier
    amount_out: int
    sqrt_price_limit_x96: int = 0


@dataclass(frozen=True)
class ExactInputSingleParams:
    """
    Swap a fixed amount_in for at least amount_out_minimum

    Attributes:
        token_in: Input token address
        token_out: Output token address
        fee: Pool fee tier
        recipient: Address receiving token_out
        deadline: Unix timestamp after which the swap reverts
        amount_in: Exact input amount (raw)
        amount_out_minimum: Minimum acceptable output (raw)
        sqrt_price_limit_x96: Price limit, 0 for none
    """
    token_in: str
    token_out: str
    fee: FeeTier
    recipient: str
    deadline: int
    amount_in: int
    amount_out_minimum: int = 0
    sqrt_price_limit_x96: int = 0


@dataclass(frozen=True)
class ExactOutputSingleParams:
    """
    Swap at most amount_in_maximum for a fixed amount_out

    Attributes:
        token_in: Input token address
        token_out: Output token address
        fee: Pool fee tier
        recipient: Address receiving token_out
        deadline: Unix timestamp after which the swap reverts
        amount_out: Exact output amount (raw)
        amount_in_maximum: Maximum acceptable input (raw)
        sqrt_price_limit_x96: Price limit, 0 for none
    """
    token_in: str
    token_out: str
    fee: FeeTier
    recipient: str
    deadline: int
    amount_out: int
    amount_in_maximum: int
    sqrt_price_limit_x96: int = 0


@dataclass(frozen=True)
class SwapParams:
    """
    Direction-agnostic swap request used by the swap module

    For exact-input swaps amount_in is fixed and amount_out is the minimum
    accepted. For exact-output swaps amount_out is fixed and amount_in is
    the maximum spent.

    Attributes:
        token_in: Input token address
        token_out: Output token address
        amount_in: Raw input amount (exact or maximum)
        amount_out: Raw output amount (minimum or exact)
        pool_fee: Pool fee tier
        recipient: Address receiving token_out
        deadline: Unix timestamp; None uses now + EVM_TX_DEADLINE_SECONDS
        sqrt_price_limit_x96: Price limit, 0 for none
    """
    token_in: str
    token_out: str
    amount_in: int
    amount_out: int
    pool_fee: FeeTier
    recipient: str
    deadline: Optional[int] = None
    sqrt_price_limit_x96: int = 0
