"""
Common type definitions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Union

from web3 import Web3

from ..errors import InvalidAddressFormat, ValueOutOfRange
from .amounts import HumanAmount, MAX_DECIMALS, to_fixed_point, to_human_amount

if TYPE_CHECKING:
    from ..infra.provider import ContractProvider

logger = logging.getLogger(__name__)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def checksum_address(address: str, field_name: str = "address") -> str:
    """
    Validate and checksum a 20-byte hex address

    Accepts lowercase, uppercase or correctly checksummed input.

    Raises:
        InvalidAddressFormat: If the value is not a valid address
    """
    if not isinstance(address, str) or not Web3.is_address(address):
        raise InvalidAddressFormat.for_value(address, field_name)
    return Web3.to_checksum_address(address)


@dataclass(frozen=True)
class Token:
    """
    ERC-20 token information

    Attributes:
        address: Checksummed token contract address
        decimals: Number of decimal places
        name: Display name
        symbol: Token symbol (caller-supplied, not read from chain)
    """
    address: str
    decimals: int
    name: str = ""
    symbol: str = ""

    def __post_init__(self):
        object.__setattr__(self, "address", checksum_address(self.address, "token address"))
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int) \
                or not 0 <= self.decimals <= MAX_DECIMALS:
            raise ValueOutOfRange(
                f"Token decimals {self.decimals!r} outside [0, {MAX_DECIMALS}]",
                "decimals",
                self.decimals,
            )

    def __str__(self) -> str:
        return self.symbol or self.name or self.address

    def __repr__(self) -> str:
        return f"Token({self.name!r}, {self.address[:10]}..., decimals={self.decimals})"

    @classmethod
    def from_known(cls, address: str, decimals: int, name: str) -> "Token":
        """Build a token from literal values (no network access)"""
        return cls(address=address, decimals=decimals, name=name)

    @classmethod
    def from_chain(
        cls,
        address: str,
        provider: Union["ContractProvider", str],
    ) -> "Token":
        """
        Read name and decimals from the token contract

        Args:
            address: Token contract address
            provider: ContractProvider or RPC URL

        Raises:
            InvalidAddressFormat: Bad token address
            ProviderUnavailable: Bad RPC URL or unreachable endpoint
            ContractCallFailed: Address is not an ERC-20 contract
        """
        from ..infra.provider import resolve_provider
        from ..protocols.uniswap.abi import ERC20_ABI

        address = checksum_address(address, "token address")
        provider = resolve_provider(provider)

        name = provider.call(address, ERC20_ABI, "name")
        decimals = provider.call(address, ERC20_ABI, "decimals")
        logger.debug(f"Loaded token {name} ({address}) decimals={decimals}")

        return cls(address=address, decimals=int(decimals), name=name)

    def raw_amount(self, ui_amount: HumanAmount) -> int:
        """Convert a UI amount to raw (smallest unit) amount"""
        return to_fixed_point(ui_amount, self.decimals)

    def ui_amount(self, raw_amount: int) -> Decimal:
        """Convert a raw amount to UI amount"""
        return to_human_amount(raw_amount, self.decimals)
