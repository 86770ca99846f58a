import pytest
from brownie import web3
from brownie.exceptions import VirtualMachineError
from eth_abi import encode

from scripts.deployments import run_deployments
from scripts.utils import is_live


@pytest.fixture(scope="module", autouse=True)
def shared_setup(module_isolation):
    pass


@pytest.fixture(autouse=True)
def isolation_setup(fn_isolation):
    pass


@pytest.fixture(scope="module")
def development_only():
    if is_live():
        pytest.skip("unit tests only run on development networks")


@pytest.fixture(scope="session")
def deployer(accounts):
    return accounts[0]


@pytest.fixture(scope="session")
def alice(accounts):
    return accounts[1]


@pytest.fixture(scope="module")
def mocks(development_only):
    return run_deployments("mocks")


@pytest.fixture(scope="module")
def vrf_coordinator(mocks):
    return mocks["VRFCoordinatorV2Mock"]


@pytest.fixture(scope="module")
def price_feed(mocks):
    return mocks["MockV3Aggregator"]


@pytest.fixture(scope="module")
def basic_nft(development_only):
    return run_deployments("basicnft")["BasicNft"]


@pytest.fixture(scope="module")
def random_ipfs_nft(vrf_coordinator):
    return run_deployments("randomipfs")["RandomIpfsNft"]


def mock_random_word(request_id, index=0):
    """Word VRFCoordinatorV2Mock hands to the consumer for `request_id`."""
    encoded = encode(["uint256", "uint256"], [request_id, index])
    return int.from_bytes(web3.keccak(encoded), byteorder="big")


class RevertsWithError:
    """Expects a revert carrying the custom error `name`.

    Depending on the brownie version, typed errors are reported either
    decoded by name or as ``typed error: 0x<selector>``; both are accepted.
    """

    def __init__(self, name):
        self.name = name
        self.selector = bytes(web3.keccak(text=f"{name}()")[:4]).hex()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb):
        if exc_type is None:
            raise AssertionError(f"transaction did not revert with {self.name}")
        if exc_type is not VirtualMachineError:
            return False
        revert_msg = (exc_val.revert_msg or "").lower()
        if self.name.lower() not in revert_msg and self.selector not in revert_msg:
            raise AssertionError(
                f"expected revert with {self.name}, got {exc_val.revert_msg!r}"
            )
        return True


def reverts_with(name):
    return RevertsWithError(name)
