"""
Contract provider abstraction over web3.py

ContractProvider is the only seam through which the factory, quoter and
router reach the chain. Web3Provider implements it over JSON-RPC and is the
single place where web3/requests exceptions become adapter errors.
Tests substitute a fake implementation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlparse

import requests
from web3 import HTTPProvider, Web3
from web3.exceptions import (
    BadFunctionCallOutput,
    ContractLogicError,
    ProviderConnectionError,
    Web3Exception,
    Web3RPCError,
)

from ..config import get_config
from ..errors import (
    ConfigurationError,
    ContractCallFailed,
    ProviderUnavailable,
    ValueOutOfRange,
)

logger = logging.getLogger(__name__)

ABI = List[Dict[str, Any]]

# Provider-side failure markers in HTTP status lines and JSON-RPC error messages
RATE_LIMIT_KEYWORDS = [
    "rate limit", "too many requests", "429", "-32005",
    "exceeded the quota", "request limit",
]

# JSON-RPC error codes that come from the node, not from contract execution
PROVIDER_RPC_CODES = {-32005, -32603, -32601, -32600, -32700}


class ContractProvider(ABC):
    """
    Capability for reading contracts and encoding calls

    Implementations must be safe to share between threads for read-only use.
    """

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Identifier of the backing endpoint (for error messages)"""
        ...

    @abstractmethod
    def call(
        self,
        address: str,
        abi: ABI,
        function: str,
        *args: Any,
        tx: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Execute a read-only (eth_call) contract function

        Args:
            address: Checksummed contract address
            abi: Contract ABI
            function: Function name
            *args: Function arguments in ABI order
            tx: Optional call overrides (e.g. {"from": ...})

        Returns:
            Decoded return value

        Raises:
            ProviderUnavailable: Endpoint unreachable, timed out, rate-limited or
                answered with an HTTP or JSON-RPC error
            ContractCallFailed: Call reverted or returned unusable output
        """
        ...

    @abstractmethod
    def encode(self, address: str, abi: ABI, function: str, *args: Any) -> str:
        """
        ABI-encode a function call

        Returns:
            0x-prefixed calldata hex string

        Raises:
            ValueOutOfRange: Arguments do not match the ABI types
        """
        ...


def create_web3(
    rpc_url: str,
    timeout: Optional[float] = None,
) -> Web3:
    """
    Create a Web3 instance for an HTTP(S) JSON-RPC endpoint

    web3's built-in request retries are disabled; callers own retry policy.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds (defaults to UNISWAP_TIMEOUT)

    Raises:
        ProviderUnavailable: If the URL is not a usable HTTP(S) URL
    """
    if not isinstance(rpc_url, str) or not rpc_url.strip():
        raise ProviderUnavailable.invalid_url(str(rpc_url), "empty")

    parsed = urlparse(rpc_url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ProviderUnavailable.invalid_url(rpc_url, "expected http(s)://host")

    if timeout is None:
        timeout = get_config().uniswap.timeout

    provider = HTTPProvider(
        rpc_url.strip(),
        request_kwargs={"timeout": timeout},
        exception_retry_configuration=None,
    )
    return Web3(provider)


class Web3Provider(ContractProvider):
    """
    ContractProvider backed by a web3.py HTTP connection

    Usage:
        provider = Web3Provider("https://eth.llamarpc.com")
        name = provider.call(token, ERC20_ABI, "name")
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: Optional[float] = None,
        web3: Optional[Web3] = None,
    ):
        """
        Args:
            rpc_url: RPC endpoint URL
            timeout: Request timeout in seconds (defaults to UNISWAP_TIMEOUT)
            web3: Pre-built Web3 instance (skips URL validation)
        """
        self._rpc_url = rpc_url
        self._timeout = timeout if timeout is not None else get_config().uniswap.timeout
        self._web3 = web3 if web3 is not None else create_web3(rpc_url, self._timeout)

    @property
    def endpoint(self) -> str:
        return self._rpc_url

    @property
    def web3(self) -> Web3:
        return self._web3

    def _contract(self, address: str, abi: ABI):
        return self._web3.eth.contract(
            address=Web3.to_checksum_address(address),
            abi=abi,
        )

    def call(
        self,
        address: str,
        abi: ABI,
        function: str,
        *args: Any,
        tx: Optional[Dict[str, Any]] = None,
    ) -> Any:
        contract = self._contract(address, abi)
        logger.debug(f"eth_call {function} on {address} args={args}")

        try:
            bound = getattr(contract.functions, function)(*args)
            if tx:
                return bound.call(tx)
            return bound.call()
        except ContractLogicError as e:
            raise ContractCallFailed.reverted(address, function, e) from e
        except BadFunctionCallOutput as e:
            raise ContractCallFailed.bad_output(address, function, e) from e
        except requests.exceptions.Timeout as e:
            raise ProviderUnavailable.timeout(self._rpc_url, self._timeout, e) from e
        except (requests.exceptions.ConnectionError, ProviderConnectionError) as e:
            raise ProviderUnavailable.connection_failed(self._rpc_url, e) from e
        except requests.exceptions.HTTPError as e:
            raise self._classify_provider_error(e) from e
        except requests.exceptions.RequestException as e:
            raise ProviderUnavailable.connection_failed(self._rpc_url, e) from e
        except Web3RPCError as e:
            if "revert" in str(e).lower() and _rpc_error_code(e) not in PROVIDER_RPC_CODES:
                raise ContractCallFailed.reverted(address, function, e) from e
            raise self._classify_provider_error(e) from e
        except Web3Exception as e:
            raise ContractCallFailed(
                f"Call to {function} on {address} failed: {e}",
                contract=address,
                function=function,
                original_error=e,
            ) from e

    def _classify_provider_error(self, error: Exception) -> ProviderUnavailable:
        """Map an HTTP status or JSON-RPC error from the endpoint to ProviderUnavailable"""
        status = getattr(getattr(error, "response", None), "status_code", None)
        rpc_code = _rpc_error_code(error)
        error_str = str(error).lower()

        if status == 429 or rpc_code == -32005 or any(keyword in error_str for keyword in RATE_LIMIT_KEYWORDS):
            logger.warning(f"Rate limited by {self._rpc_url}: {error}")
            return ProviderUnavailable.rate_limited(self._rpc_url, error)

        logger.warning(f"RPC error from {self._rpc_url}: {error}")
        return ProviderUnavailable.invalid_response(self._rpc_url, error)

    def encode(self, address: str, abi: ABI, function: str, *args: Any) -> str:
        contract = self._contract(address, abi)
        try:
            data = contract.encode_abi(function, args=list(args))
        except Web3Exception as e:
            raise ValueOutOfRange(
                f"Arguments for {function} do not match its ABI: {e}",
                field_name=function,
                value=args,
            ) from e
        logger.debug(f"Encoded {function} for {address}: {data[:10]}...")
        return data

    def __repr__(self) -> str:
        return f"Web3Provider(endpoint={self._rpc_url})"


def _rpc_error_code(error: Exception) -> Optional[int]:
    """JSON-RPC error code from a Web3RPCError, if the response carried one"""
    response = getattr(error, "rpc_response", None) or {}
    rpc_error = response.get("error") if isinstance(response, dict) else None
    if isinstance(rpc_error, dict):
        return rpc_error.get("code")
    return None


def resolve_provider(provider: Union[ContractProvider, str]) -> ContractProvider:
    """Accept a ContractProvider or an RPC URL"""
    if isinstance(provider, ContractProvider):
        return provider
    if isinstance(provider, str):
        return Web3Provider(provider)
    raise ConfigurationError.invalid(
        "provider",
        f"expected ContractProvider or RPC URL, got {type(provider).__name__}",
    )
