from scripts.deployments import run_deployments


def main():
    random_ipfs_nft = run_deployments("mocks", "randomipfs")["RandomIpfsNft"]
    print(f"RandomIpfsNft deployed at {random_ipfs_nft.address}")
