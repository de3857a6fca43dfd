"""
Shared fixtures for unit tests (no network access)
"""

import sys
from pathlib import Path

import pytest

# Add project root and this directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from fakes import FakeProvider


@pytest.fixture
def fake_provider():
    """Empty FakeProvider; tests fill responses/errors as needed"""
    return FakeProvider()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove adapter environment overrides for the duration of a test"""
    for key in (
        "UNISWAP_TIMEOUT",
        "UNISWAP_V3_FACTORY_ADDRESS",
        "UNISWAP_V3_QUOTER_ADDRESS",
        "UNISWAP_V3_ROUTER_ADDRESS",
        "ETH_RPC_URL",
        "BASE_RPC_URL",
        "EVM_TX_DEADLINE_SECONDS",
        "LOG_FILE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
