from scripts.deployments import run_deployments


def main():
    basic_nft = run_deployments("basicnft")["BasicNft"]
    print(f"BasicNft deployed at {basic_nft.address}")
