"""
Conversion between human-readable token amounts and on-chain fixed-point integers

On-chain amounts are uint256 integers scaled by 10**decimals. Human amounts
are Decimals.

The two directions are not symmetric:

- to_fixed_point() scales with enough working precision to be exact and then
  truncates toward zero, so anything finer than 10**-decimals is dropped.
- to_human_amount() divides in the caller's decimal context (28 significant
  digits by default). Fixed-point values with more significant digits than
  the context precision are rounded.

So to_fixed_point(to_human_amount(x)) may differ from x for large x, and
to_human_amount(to_fixed_point(h)) may differ from h when h carries more
digits than either the token decimals or the context precision allow.
"""

from decimal import Decimal, InvalidOperation, ROUND_DOWN, localcontext
from typing import Union

from ..errors import AmountOverflow, ValueOutOfRange

HumanAmount = Union[Decimal, int, float, str]

UINT256_MAX = 2**256 - 1
MAX_DECIMALS = 255

# 78 digits covers all of uint256; the extra headroom keeps 10**255 exact
_EXACT_PRECISION = 400


def _check_decimals(decimals: int) -> int:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValueOutOfRange(f"decimals must be an int, got {decimals!r}", "decimals", decimals)
    if not 0 <= decimals <= MAX_DECIMALS:
        raise ValueOutOfRange(
            f"decimals={decimals} outside [0, {MAX_DECIMALS}]", "decimals", decimals
        )
    return decimals


def _to_decimal(human_amount: HumanAmount) -> Decimal:
    if isinstance(human_amount, Decimal):
        value = human_amount
    elif isinstance(human_amount, (int, float, str)) and not isinstance(human_amount, bool):
        # str() first so 0.1 becomes Decimal("0.1"), not its binary expansion
        try:
            value = Decimal(str(human_amount).strip())
        except InvalidOperation as e:
            raise ValueOutOfRange(
                f"Not a numeric amount: {human_amount!r}", "human_amount", human_amount
            ) from e
    else:
        raise ValueOutOfRange(
            f"Unsupported amount type {type(human_amount).__name__}", "human_amount", human_amount
        )

    if not value.is_finite():
        raise ValueOutOfRange(f"Amount must be finite, got {value}", "human_amount", value)
    if value < 0:
        raise ValueOutOfRange(f"Amount must be non-negative, got {value}", "human_amount", value)
    return value


def to_fixed_point(human_amount: HumanAmount, decimals: int) -> int:
    """
    Convert a human amount to a fixed-point integer

    Args:
        human_amount: Amount in token units (e.g. Decimal("1.5") WETH)
        decimals: Token decimal precision

    Returns:
        Integer amount scaled by 10**decimals, truncated toward zero

    Raises:
        ValueOutOfRange: Negative, non-finite or non-numeric amount, or bad decimals
        AmountOverflow: Scaled amount does not fit uint256
    """
    decimals = _check_decimals(decimals)
    value = _to_decimal(human_amount)

    # 10**78 > UINT256_MAX; reject before quantize() runs out of precision
    if value and value.adjusted() + decimals >= 78:
        raise AmountOverflow(
            f"{human_amount} at {decimals} decimals exceeds uint256",
            value=human_amount,
            decimals=decimals,
        )

    with localcontext() as ctx:
        ctx.prec = _EXACT_PRECISION
        ctx.rounding = ROUND_DOWN
        scaled = value.scaleb(decimals).quantize(Decimal(1), rounding=ROUND_DOWN)

    raw = int(scaled)
    if raw > UINT256_MAX:
        raise AmountOverflow(
            f"{human_amount} at {decimals} decimals exceeds uint256",
            value=human_amount,
            decimals=decimals,
        )
    return raw


def to_human_amount(fixed: int, decimals: int) -> Decimal:
    """
    Convert a fixed-point integer to a human amount

    Best-effort: the result is rounded to the current decimal context
    precision, so very large values lose their low-order digits.

    Args:
        fixed: On-chain amount (uint256)
        decimals: Token decimal precision

    Returns:
        Decimal amount in token units
    """
    decimals = _check_decimals(decimals)
    if isinstance(fixed, bool) or not isinstance(fixed, int):
        raise ValueOutOfRange(f"Fixed-point amount must be an int, got {fixed!r}", "fixed", fixed)
    if not 0 <= fixed <= UINT256_MAX:
        raise ValueOutOfRange.for_field("fixed", fixed, 256)

    # unary plus applies the context precision
    return +(Decimal(fixed).scaleb(-decimals))
