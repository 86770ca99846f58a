from typing import Any, Callable, Dict, FrozenSet, List, Optional, Tuple

from brownie import (  # type: ignore
    BasicNft,
    MockV3Aggregator,
    RandomIpfsNft,
    VRFCoordinatorV2Mock,
)
from brownie import Contract, config

from scripts.breeds import Breed
from scripts.utils import get_deployer, get_network_config, is_live, should_verify

# 0.25 LINK premium per request
BASE_FEE = 25 * 10 ** 16
GAS_PRICE_LINK = 10 ** 9
DECIMALS = 18
INITIAL_PRICE = 2_000 * 10 ** 18
VRF_SUBSCRIPTION_FUND_AMOUNT = 10 * 10 ** 18

Deployment = Callable[[], Dict[str, Any]]

_DEPLOYMENTS: List[Tuple[Deployment, FrozenSet[str]]] = []

CONTRACT_TO_MOCK = {
    "vrf_coordinator": VRFCoordinatorV2Mock,
    "eth_usd_price_feed": MockV3Aggregator,
}


def tagged(*tags):
    def wrapped(f):
        _DEPLOYMENTS.append((f, frozenset(tags)))
        return f

    return wrapped


def run_deployments(*tags) -> Dict[str, Any]:
    requested = set(tags)
    deployed: Dict[str, Any] = {}
    for deployment, deployment_tags in _DEPLOYMENTS:
        if deployment_tags & requested:
            deployed.update(deployment())
    return deployed


def get_contract(config_key: str):
    if config_key not in CONTRACT_TO_MOCK:
        raise ValueError(f"no mock known for {config_key}")
    contract_type = CONTRACT_TO_MOCK[config_key]
    if not is_live():
        if len(contract_type) == 0:
            deploy_mocks()
        return contract_type[-1]
    return Contract.from_abi(
        contract_type._name, get_network_config(config_key), contract_type.abi
    )


def get_token_uris(token_uris: Optional[List[str]] = None) -> List[str]:
    if token_uris is None:
        token_uris = list(config["token_uris"])
    if len(token_uris) != len(Breed):
        raise ValueError(f"expected {len(Breed)} token uris, got {len(token_uris)}")
    for token_uri in token_uris:
        if not token_uri.startswith("ipfs://"):
            raise ValueError(f"{token_uri} is not an ipfs uri")
    return token_uris


@tagged("all", "mocks")
def deploy_mocks():
    if is_live():
        return {}

    deployer = get_deployer()
    print("Local network detected! Deploying mocks...")
    vrf_coordinator = deployer.deploy(VRFCoordinatorV2Mock, BASE_FEE, GAS_PRICE_LINK)
    price_feed = deployer.deploy(MockV3Aggregator, DECIMALS, INITIAL_PRICE)
    print("Mocks Deployed")
    print("-" * 33)
    return {"VRFCoordinatorV2Mock": vrf_coordinator, "MockV3Aggregator": price_feed}


@tagged("all", "basicnft", "main")
def deploy_basic_nft():
    deployer = get_deployer()
    basic_nft = deployer.deploy(BasicNft, publish_source=should_verify())
    return {"BasicNft": basic_nft}


@tagged("all", "randomipfs", "main")
def deploy_random_ipfs_nft():
    deployer = get_deployer()
    vrf_coordinator = get_contract("vrf_coordinator")

    if is_live():
        subscription_id = get_network_config("subscription_id")
    else:
        tx = vrf_coordinator.createSubscription({"from": deployer})
        subscription_id = tx.events["SubscriptionCreated"]["subId"]
        vrf_coordinator.fundSubscription(
            subscription_id, VRF_SUBSCRIPTION_FUND_AMOUNT, {"from": deployer}
        )

    random_ipfs_nft = deployer.deploy(
        RandomIpfsNft,
        vrf_coordinator.address,
        subscription_id,
        get_network_config("gas_lane"),
        get_network_config("mint_fee"),
        get_network_config("callback_gas_limit"),
        get_token_uris(),
        publish_source=should_verify(),
    )
    return {"RandomIpfsNft": random_ipfs_nft}
