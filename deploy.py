"""
Contract Deployment
Entry point: deploys the Project contract and exits 0 on success, 1 on failure
"""

import asyncio
import sys
from loguru import logger

from blockchain.deployer import run
from utils.config import DeployConfig
from utils.exceptions import describe_error
from utils.logging_config import announce, configure_logging


def cli():
    """Console entry point (no arguments)"""
    try:
        config = DeployConfig.from_env()
        configure_logging(config.log_level, config.log_file)
    except (ValueError, OSError) as e:
        configure_logging()
        announce.error(f"Error during deployment: {describe_error(e)}")
        sys.exit(1)

    logger.info("=" * 70)
    logger.info("RWA Syndicate Contract Deployment")
    logger.info("=" * 70)

    try:
        exit_code = asyncio.run(run(config=config))
    except KeyboardInterrupt:
        announce.info("Interrupted by user")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
