from brownie import RandomIpfsNft  # type: ignore
from scripts.utils import get_deployer, with_deployed


@with_deployed(RandomIpfsNft)
def main(random_ipfs_nft):
    deployer = get_deployer()
    amount = random_ipfs_nft.balance()
    random_ipfs_nft.withdraw({"from": deployer})
    print(f"Withdrew {amount} wei to {deployer}")
