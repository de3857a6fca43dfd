"""
Error definitions for Uniswap Adapter
"""

from .exceptions import (
    ErrorCode,
    UniswapAdapterError,
    InvalidAddressFormat,
    ProviderUnavailable,
    ContractCallFailed,
    WrongPoolFee,
    ValueOutOfRange,
    AmountOverflow,
    ConfigurationError,
    OperationNotSupported,
    NotSupported,
)

__all__ = [
    "ErrorCode",
    "UniswapAdapterError",
    "InvalidAddressFormat",
    "ProviderUnavailable",
    "ContractCallFailed",
    "WrongPoolFee",
    "ValueOutOfRange",
    "AmountOverflow",
    "ConfigurationError",
    "OperationNotSupported",
    "NotSupported",
]
