"""
Project Deployment
Deploys the Tokenized Real-World Asset Ownership Syndicate contract
"""

from typing import Optional
from loguru import logger

from blockchain.network import NetworkClient
from utils.config import DeployConfig
from utils.env_file import update_env_file
from utils.exceptions import describe_error
from utils.logging_config import announce


async def main(
    network: Optional[NetworkClient] = None,
    config: Optional[DeployConfig] = None
) -> str:
    """
    Deploy the configured contract and wait for confirmation

    Args:
        network: Network client (None = built from config)
        config: Deployment configuration (None = from environment)

    Returns:
        Deployed contract address
    """
    config = config or DeployConfig.from_env()
    network = network or NetworkClient(config)

    announce.info("Deploying Tokenized Real-World Asset Ownership Syndicate...")

    factory = await network.get_contract_factory(config.contract_name)

    contract = await factory.deploy()

    await contract.wait_for_deployment()

    address = await contract.get_address()

    announce.success(f"{config.contract_name} deployed to: {address}")
    announce.success("Deployment completed successfully!")

    if config.save_address:
        update_env_file(config.env_file, config.address_env_key, address)

    return address


async def run(
    network: Optional[NetworkClient] = None,
    config: Optional[DeployConfig] = None
) -> int:
    """
    Run the deployment and map the outcome to an exit code

    Returns:
        0 on success, 1 on any error
    """
    try:
        await main(network=network, config=config)
        return 0
    except Exception as e:
        announce.error(f"Error during deployment: {describe_error(e)}")
        logger.opt(exception=e).debug("Deployment traceback")
        return 1
