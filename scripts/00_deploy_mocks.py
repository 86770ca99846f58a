from scripts.deployments import run_deployments


def main():
    run_deployments("mocks")
