import pytest

from b58_helpers import make_address


@pytest.fixture
def mainnet_address():
    return make_address(0x00)


@pytest.fixture
def testnet_address():
    return make_address(0x6F)
