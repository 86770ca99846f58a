from typing import Optional

from scripts.breeds import Breed
from scripts.utils import wait_for


def request_nft(random_ipfs_nft, requester):
    """Pays the mint fee and returns `(request_id, first_candidate_token_id)`.

    Tokens minted before the request can never belong to it, so the token
    counter read beforehand bounds the search for the requester's token.
    """
    start_token_id = random_ipfs_nft.getTokenCounter()
    tx = random_ipfs_nft.requestNft(
        {"from": requester, "value": random_ipfs_nft.getMintFee()}
    )
    tx.wait(1)
    return tx.events["NftRequested"]["requestId"], start_token_id


def find_minted_token(random_ipfs_nft, requester, start_token_id) -> Optional[int]:
    for token_id in range(start_token_id, random_ipfs_nft.getTokenCounter()):
        if random_ipfs_nft.ownerOf(token_id) == requester:
            return token_id
    return None


def wait_for_minted_token(
    random_ipfs_nft, requester, start_token_id, timeout=300, poll_interval=5
) -> int:
    minted = []

    def is_minted():
        token_id = find_minted_token(random_ipfs_nft, requester, start_token_id)
        if token_id is not None:
            minted.append(token_id)
        return bool(minted)

    wait_for(
        is_minted,
        timeout=timeout,
        poll_interval=poll_interval,
        message=f"no token minted to {requester} from index {start_token_id}",
    )
    return minted[0]


def breed_of_token(random_ipfs_nft, token_id) -> Breed:
    token_uri = random_ipfs_nft.tokenURI(token_id)
    for breed in Breed:
        if random_ipfs_nft.getDogTokenUris(int(breed)) == token_uri:
            return breed
    raise ValueError(f"token {token_id} has unknown uri {token_uri}")
