"""
Infrastructure layer for Uniswap Adapter

Provides:
- ContractProvider: capability interface for contract reads and call encoding
- Web3Provider: web3.py implementation over HTTP JSON-RPC
"""

from .provider import (
    ABI,
    ContractProvider,
    Web3Provider,
    create_web3,
    resolve_provider,
)

__all__ = [
    "ABI",
    "ContractProvider",
    "Web3Provider",
    "create_web3",
    "resolve_provider",
]
