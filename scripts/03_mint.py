from brownie import BasicNft, RandomIpfsNft  # type: ignore
from scripts.deployments import get_contract
from scripts.minting import breed_of_token, request_nft, wait_for_minted_token
from scripts.utils import get_deployer, is_live, with_deployed


@with_deployed(BasicNft)
def mint_basic_nft(basic_nft):
    deployer = get_deployer()
    tx = basic_nft.mintNft({"from": deployer})
    tx.wait(1)
    token_id = basic_nft.getTokenCounter() - 1
    print(f"Basic NFT index {token_id} has tokenURI: {basic_nft.tokenURI(token_id)}")


@with_deployed(RandomIpfsNft)
def mint_random_ipfs_nft(random_ipfs_nft):
    deployer = get_deployer()
    request_id, start_token_id = request_nft(random_ipfs_nft, deployer)
    print(f"Requested NFT, request id {request_id}")

    if not is_live():
        vrf_coordinator = get_contract("vrf_coordinator")
        vrf_coordinator.fulfillRandomWords(
            request_id, random_ipfs_nft.address, {"from": deployer}
        )

    token_id = wait_for_minted_token(random_ipfs_nft, deployer, start_token_id)
    breed = breed_of_token(random_ipfs_nft, token_id)
    print(f"Minted a {breed.name}")
    print(
        f"Random IPFS NFT index {token_id} has tokenURI: "
        f"{random_ipfs_nft.tokenURI(token_id)}"
    )


def main():
    mint_basic_nft()
    mint_random_ipfs_nft()
