"""
In-memory ContractProvider for unit tests

Records every call and encode request and answers from canned responses,
so contract commands can be tested without a network.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from uniswap_adapter.errors import ContractCallFailed
from uniswap_adapter.infra.provider import ContractProvider

# Mainnet addresses used across tests
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
TOKEN = "0x535887989b9EdffB63b1Fd5C6b99a4d45443b49a"
TURBO = "0xA35923162C49cF95e6BF26623385eb431ad920D3"
RECEIVER = "0xCa017e24f449Ec454E94C843bbbF2cE61b7F6B69"
POOL = "0xFbDbaC2d456A3CC2754A626C2fB83C1af25A3a6F"

FACTORY = "0x1F98431c8aD98523631AE4a59f267346ea31F984"
QUOTER = "0xb27308f9F90D607463bb33eA1BeBb41C27CE5AB6"
ROUTER = "0xE592427A0AEce92De3Edee1F18E0157C05861564"


class FakeProvider(ContractProvider):
    """
    Canned-response provider

    responses maps a function name to a value, or to a callable taking the
    call arguments. errors maps a function name to an exception to raise.
    """

    def __init__(self, responses=None, errors=None, endpoint="fake://provider"):
        self.responses = dict(responses or {})
        self.errors = dict(errors or {})
        self.calls = []
        self.encoded = []
        self._endpoint = endpoint

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def call(self, address, abi, function, *args, tx=None):
        self.calls.append((address, function, args, tx))
        if function in self.errors:
            raise self.errors[function]
        value = self.responses[function]
        return value(*args) if callable(value) else value

    def encode(self, address, abi, function, *args):
        self.encoded.append((address, function, args))
        return "0x" + function.encode().hex()


def reverted(contract: str, function: str) -> ContractCallFailed:
    """ContractCallFailed as Web3Provider raises it for a revert"""
    return ContractCallFailed.reverted(contract, function, Exception("execution reverted"))
