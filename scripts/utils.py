import sys
import time
from functools import lru_cache, wraps
from typing import Any, Callable, cast

from brownie import accounts, config, network
from brownie.network.account import LocalAccount

DEV_CHAIN_IDS = {1337, 31337}

_MISSING = object()


def is_live():
    return network.chain.id not in DEV_CHAIN_IDS


def get_network_config(key: str, default: Any = _MISSING) -> Any:
    network_name = network.show_active()
    network_config = config["networks"].get(network_name, {})
    if key in network_config:
        return network_config[key]
    if default is _MISSING:
        raise ValueError(f"{key} not configured for network {network_name}")
    return default


def should_verify() -> bool:
    return bool(get_network_config("verify", False))


@lru_cache()
def get_deployer():
    if not is_live():
        return accounts[0]
    account_id = get_network_config("deployer", None)
    if account_id is None:
        raise ValueError(f"chain id {network.chain.id} has no deployer account")
    return cast(LocalAccount, accounts.load(account_id))


def abort(reason, code=1):
    print(f"error: {reason}", file=sys.stderr)
    sys.exit(code)


def with_deployed(Contract):
    def wrapped(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if len(Contract) == 0:
                abort(f"{Contract.deploy._name} not deployed")

            contract = Contract[-1]
            result = f(contract, *args, **kwargs)
            return result

        return wrapper

    return wrapped


def wait_for(
    predicate: Callable[[], bool],
    timeout: float = 300,
    poll_interval: float = 5,
    message: str = "timed out",
):
    deadline = time.time() + timeout
    while not predicate():
        if time.time() > deadline:
            raise TimeoutError(message)
        time.sleep(poll_interval)
