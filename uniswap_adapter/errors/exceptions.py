"""
Exception definitions for Uniswap Adapter
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """
    Unified error codes for Uniswap contract operations

    1xxx - Provider/RPC errors
    2xxx - Contract call errors
    4xxx - Pool errors
    7xxx - Operation errors
    8xxx - Input/value errors
    9xxx - Configuration errors
    """
    # Provider errors (recoverable)
    RPC_CONNECTION_FAILED = "1001"
    RPC_TIMEOUT = "1002"
    RPC_RATE_LIMITED = "1003"
    RPC_INVALID_RESPONSE = "1004"
    RPC_INVALID_URL = "1005"

    # Contract call errors
    CONTRACT_CALL_FAILED = "2001"
    CONTRACT_CALL_REVERTED = "2002"

    # Pool errors
    POOL_WRONG_FEE = "4001"

    # Operation errors
    OPERATION_NOT_SUPPORTED = "7001"

    # Input errors
    INVALID_ADDRESS = "8001"
    VALUE_OUT_OF_RANGE = "8002"
    AMOUNT_OVERFLOW = "8003"

    # Configuration errors
    CONFIG_INVALID = "9001"
    CONFIG_MISSING = "9002"


class UniswapAdapterError(Exception):
    """
    Base exception for all Uniswap adapter errors

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        recoverable: Whether the error might succeed on retry
        original_error: The underlying exception if any
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        recoverable: bool = False,
        original_error: Optional[Exception] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.recoverable = recoverable
        self.original_error = original_error
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"

    @property
    def should_retry(self) -> bool:
        """Indicate if the caller may retry the operation"""
        return self.recoverable


class InvalidAddressFormat(UniswapAdapterError):
    """
    Address is not a valid 20-byte hex identifier

    Raised when:
    - A token, recipient or contract address cannot be parsed
    """

    def __init__(self, message: str, address: Optional[str] = None):
        super().__init__(
            message,
            ErrorCode.INVALID_ADDRESS,
            recoverable=False,
            details={"address": address},
        )
        self.address = address

    @classmethod
    def for_value(cls, address, field_name: str = "address") -> "InvalidAddressFormat":
        return cls(f"Invalid {field_name}: {address!r}", address=str(address))


class ProviderUnavailable(UniswapAdapterError):
    """
    RPC provider errors - typically recoverable

    Raised when:
    - The RPC URL is malformed
    - Connection to the endpoint fails
    - Request times out
    - The endpoint rate-limits or answers with an HTTP or JSON-RPC error
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.RPC_CONNECTION_FAILED,
        original_error: Optional[Exception] = None,
        endpoint: Optional[str] = None,
        recoverable: bool = True,
    ):
        super().__init__(
            message,
            code,
            recoverable=recoverable,
            original_error=original_error,
            details={"endpoint": endpoint} if endpoint else None,
        )
        self.endpoint = endpoint

    @classmethod
    def invalid_url(cls, endpoint: str, reason: str = "") -> "ProviderUnavailable":
        suffix = f": {reason}" if reason else ""
        return cls(
            f"Invalid RPC URL {endpoint!r}{suffix}",
            ErrorCode.RPC_INVALID_URL,
            endpoint=endpoint,
            recoverable=False,
        )

    @classmethod
    def connection_failed(cls, endpoint: str, error: Exception = None) -> "ProviderUnavailable":
        return cls(
            f"Failed to connect to RPC endpoint: {endpoint}",
            ErrorCode.RPC_CONNECTION_FAILED,
            original_error=error,
            endpoint=endpoint,
        )

    @classmethod
    def timeout(cls, endpoint: str, timeout_seconds: float, error: Exception = None) -> "ProviderUnavailable":
        return cls(
            f"RPC request timed out after {timeout_seconds}s",
            ErrorCode.RPC_TIMEOUT,
            original_error=error,
            endpoint=endpoint,
        )

    @classmethod
    def rate_limited(cls, endpoint: str, error: Exception = None) -> "ProviderUnavailable":
        return cls(
            f"RPC rate limit exceeded: {endpoint}",
            ErrorCode.RPC_RATE_LIMITED,
            original_error=error,
            endpoint=endpoint,
        )

    @classmethod
    def invalid_response(cls, endpoint: str, error: Exception = None) -> "ProviderUnavailable":
        return cls(
            f"RPC endpoint {endpoint} returned an error: {error}",
            ErrorCode.RPC_INVALID_RESPONSE,
            original_error=error,
            endpoint=endpoint,
        )


class ContractCallFailed(UniswapAdapterError):
    """
    Contract call errors - not recoverable

    Raised when:
    - The call reverts
    - The target address is not a conforming contract
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONTRACT_CALL_FAILED,
        contract: Optional[str] = None,
        function: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=False,
            original_error=original_error,
            details={"contract": contract, "function": function},
        )
        self.contract = contract
        self.function = function

    @classmethod
    def reverted(cls, contract: str, function: str, error: Exception = None) -> "ContractCallFailed":
        return cls(
            f"Call to {function} on {contract} reverted: {error}",
            ErrorCode.CONTRACT_CALL_REVERTED,
            contract=contract,
            function=function,
            original_error=error,
        )

    @classmethod
    def bad_output(cls, contract: str, function: str, error: Exception = None) -> "ContractCallFailed":
        return cls(
            f"Call to {function} on {contract} returned no usable output "
            f"(not a contract or ABI mismatch): {error}",
            contract=contract,
            function=function,
            original_error=error,
        )


class WrongPoolFee(ContractCallFailed):
    """
    No pool deployed for the token pair at the requested fee tier

    Raised when:
    - A quote or swap simulation reverts
    - The factory returns the zero address
    - A fee value is not a known tier or does not fit uint24
    """

    def __init__(
        self,
        message: str,
        fee: Optional[int] = None,
        contract: Optional[str] = None,
        function: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            ErrorCode.POOL_WRONG_FEE,
            contract=contract,
            function=function,
            original_error=original_error,
        )
        self.details["fee"] = fee
        self.fee = fee

    @classmethod
    def no_pool(cls, token_a: str, token_b: str, fee: int) -> "WrongPoolFee":
        return cls(f"No pool for {token_a}/{token_b} at fee {fee}", fee=fee)

    @classmethod
    def from_call(cls, error: ContractCallFailed, fee: Optional[int] = None) -> "WrongPoolFee":
        return cls(
            f"Wrong pool fee {fee}: {error.message}",
            fee=fee,
            contract=error.contract,
            function=error.function,
            original_error=error,
        )

    @classmethod
    def unknown_tier(cls, fee) -> "WrongPoolFee":
        return cls(f"Unknown pool fee tier: {fee!r}", fee=fee if isinstance(fee, int) else None)


class ValueOutOfRange(UniswapAdapterError, ValueError):
    """
    Value does not fit the target field width or allowed range

    Raised when:
    - A uint256 amount does not fit uint160/uint24 fields
    - An amount is negative
    - Token decimals are outside [0, 255]
    """

    def __init__(self, message: str, field_name: Optional[str] = None, value=None):
        super().__init__(
            message,
            ErrorCode.VALUE_OUT_OF_RANGE,
            recoverable=False,
            details={"field": field_name, "value": str(value)},
        )
        self.field_name = field_name
        self.value = value

    @classmethod
    def for_field(cls, field_name: str, value, bits: int) -> "ValueOutOfRange":
        return cls(
            f"{field_name}={value} does not fit uint{bits}",
            field_name=field_name,
            value=value,
        )


class AmountOverflow(UniswapAdapterError, OverflowError):
    """Scaled token amount exceeds the uint256 range"""

    def __init__(self, message: str, value=None, decimals: Optional[int] = None):
        super().__init__(
            message,
            ErrorCode.AMOUNT_OVERFLOW,
            recoverable=False,
            details={"value": str(value), "decimals": decimals},
        )
        self.value = value
        self.decimals = decimals


class ConfigurationError(UniswapAdapterError):
    """
    Configuration-related errors

    Raised when:
    - Required configuration is missing
    - Configuration values are invalid
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
    ):
        super().__init__(message, code, recoverable=False)

    @classmethod
    def missing(cls, param: str) -> "ConfigurationError":
        return cls(f"Missing required configuration: {param}", ErrorCode.CONFIG_MISSING)

    @classmethod
    def invalid(cls, param: str, reason: str) -> "ConfigurationError":
        return cls(f"Invalid configuration '{param}': {reason}", ErrorCode.CONFIG_INVALID)


class OperationNotSupported(UniswapAdapterError):
    """
    Operation not supported

    Raised when:
    - A protocol version / swap direction combination is not wired
    - A chain has no deployment of the required contract
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        protocol: Optional[str] = None,
    ):
        super().__init__(
            message,
            ErrorCode.OPERATION_NOT_SUPPORTED,
            recoverable=False,
            details={"operation": operation, "protocol": protocol},
        )
        self.operation = operation
        self.protocol = protocol

    @classmethod
    def not_implemented(cls, operation: str, protocol: str) -> "OperationNotSupported":
        return cls(
            f"Operation '{operation}' is not supported by {protocol}",
            operation=operation,
            protocol=protocol,
        )


# Short name used by callers matching on the error taxonomy
NotSupported = OperationNotSupported
