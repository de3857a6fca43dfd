"""
Argument narrowing for Uniswap V3 contract calls

Values are checked against their Solidity width before they reach the ABI
encoder, so an out-of-range argument fails with a typed adapter error
instead of a web3 encoding error.
"""

from typing import Union

from ...errors import ValueOutOfRange, WrongPoolFee
from ...types.amounts import UINT256_MAX
from ...types.fee import FeeTier

UINT24_MAX = 2**24 - 1
UINT160_MAX = 2**160 - 1

_MAX_BY_BITS = {
    24: UINT24_MAX,
    160: UINT160_MAX,
    256: UINT256_MAX,
}


def check_uint(field_name: str, value: int, bits: int = 256) -> int:
    """
    Ensure value is an int in [0, 2**bits - 1]

    Raises:
        ValueOutOfRange: If the value is not an int or does not fit
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueOutOfRange(
            f"{field_name} must be an int, got {type(value).__name__}",
            field_name=field_name,
            value=value,
        )
    if value < 0 or value > _MAX_BY_BITS[bits]:
        raise ValueOutOfRange.for_field(field_name, value, bits)
    return value


def fee_to_uint24(fee: Union[FeeTier, int]) -> int:
    """
    Fee value as passed to the contracts

    Plain ints are accepted so callers can try non-enumerated tiers;
    the chain then decides whether a pool exists.

    Raises:
        WrongPoolFee: If the fee is not a FeeTier or does not fit uint24
    """
    if isinstance(fee, FeeTier):
        return fee.as_basis_points()
    if isinstance(fee, bool) or not isinstance(fee, int):
        raise WrongPoolFee.unknown_tier(fee)
    if fee < 0 or fee > UINT24_MAX:
        raise WrongPoolFee(f"Pool fee {fee} does not fit uint24", fee=fee)
    return fee
