"""
Uniswap V3 pool fee tiers
"""

from decimal import Decimal
from enum import Enum

from ..errors import WrongPoolFee


class FeeTier(Enum):
    """
    Pool fee tiers, valued in hundredths of a basis point (1e-6)

    100 = 0.01%, 500 = 0.05%, 3000 = 0.30%, 10000 = 1%
    """
    FEE_10000 = 10000  # 1%
    FEE_3000 = 3000    # 0.3%
    FEE_500 = 500      # 0.05%
    FEE_100 = 100      # 0.01%

    def as_basis_points(self) -> int:
        """Fee as the uint24 value the contracts expect"""
        return self.value

    @property
    def rate(self) -> Decimal:
        """Fee as a fraction (0.003 for FEE_3000)"""
        return Decimal(self.value) / Decimal(1_000_000)

    @property
    def tick_spacing(self) -> int:
        return TICK_SPACING_BY_FEE[self]

    @classmethod
    def from_basis_points(cls, value: int) -> "FeeTier":
        """
        Look up a tier by its integer value

        Raises:
            WrongPoolFee: If the value is not one of the enumerated tiers
        """
        # bool is an int subclass; True must not resolve to a tier
        if isinstance(value, bool) or not isinstance(value, int):
            raise WrongPoolFee.unknown_tier(value)
        try:
            return cls(value)
        except ValueError as e:
            raise WrongPoolFee.unknown_tier(value) from e

    def __str__(self) -> str:
        return f"{self.rate * 100:.2f}%"


TICK_SPACING_BY_FEE = {
    FeeTier.FEE_100: 1,
    FeeTier.FEE_500: 10,
    FeeTier.FEE_3000: 60,
    FeeTier.FEE_10000: 200,
}
