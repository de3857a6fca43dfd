"""
Shared configuration and fixtures for live contract tests.

These tests only read chain state (eth_call); nothing is signed or sent.

Environment Variables:
    ETH_RPC_URL: Ethereum mainnet RPC endpoint (required, tests skip without it)
"""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

# Load .env file
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


def skip_if_no_rpc():
    """Return a skip message if no RPC endpoint is configured"""
    if not os.getenv("ETH_RPC_URL"):
        return "Missing ETH_RPC_URL environment variable"
    return None


@pytest.fixture(scope="module")
def provider():
    """Web3Provider for Ethereum mainnet"""
    skip_msg = skip_if_no_rpc()
    if skip_msg:
        pytest.skip(skip_msg)

    from uniswap_adapter.infra.provider import Web3Provider
    return Web3Provider(os.environ["ETH_RPC_URL"])
