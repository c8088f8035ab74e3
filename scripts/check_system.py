"""
System Check Script
Verifies configuration, RPC connection and artifacts before deploying
"""

import sys
from web3 import Web3
from loguru import logger

from blockchain.artifacts import ArtifactProvider
from blockchain.network import NetworkClient
from utils.config import DeployConfig
from utils.logging_config import configure_logging


def check_environment_variables(config: DeployConfig) -> bool:
    """Check deployer settings"""
    logger.info("Checking environment variables...")

    if not config.rpc_url:
        logger.error("RPC_URL must be set")
        return False

    logger.success(f"✓ RPC_URL: {config.rpc_url}")

    if config.private_key:
        logger.success("✓ DEPLOYER_PRIVATE_KEY set")
    else:
        logger.warning("  DEPLOYER_PRIVATE_KEY not set - using the node's unlocked account")

    return True


def check_rpc_connection(network: NetworkClient) -> bool:
    """Check RPC endpoint connection"""
    logger.info("Checking RPC connection...")

    try:
        network.connect()
        block = network.w3.eth.block_number
        logger.success(f"  ✓ {network.config.network_name}: Connected (Block: {block})")
        return True
    except Exception as e:
        logger.error(f"  ✗ {network.config.network_name}: {e}")
        return False


def check_deployer_balance(network: NetworkClient) -> bool:
    """Check deployer account balance"""
    logger.info("Checking deployer balance...")

    try:
        address = network.deployer_address
        balance = network.get_balance(address)
        balance_eth = Web3.from_wei(balance, 'ether')

        logger.info(f"  Deployer {address}: {balance_eth:.4f} ETH")

        if balance == 0:
            logger.warning("  ⚠ Deployer balance is zero")
        else:
            logger.success("  ✓ Deployer funded")
        return True
    except Exception as e:
        logger.error(f"  Error checking deployer balance: {e}")
        return False


def check_contract_artifact(config: DeployConfig) -> bool:
    """Check that the contract artifact exists and is deployable"""
    logger.info("Checking contract artifact...")

    try:
        artifact = ArtifactProvider(config.artifacts_dir).get_artifact(config.contract_name)
    except Exception as e:
        logger.error(f"  ✗ {e}")
        return False

    if not artifact.is_deployable:
        logger.error(f"  ✗ {artifact.fully_qualified_name} is abstract (no bytecode)")
        return False

    logger.success(f"  ✓ {artifact.fully_qualified_name} ({artifact.path})")
    return True


def main(config: DeployConfig = None, network: NetworkClient = None) -> int:
    """Run all system checks"""
    logger.info("=" * 70)
    logger.info("Deployment System Check")
    logger.info("=" * 70)

    try:
        config = config or DeployConfig.from_env()
        network = network or NetworkClient(config)
    except Exception as e:
        logger.error(f"  ✗ Environment Variables: {e}")
        logger.error("❌ Not ready - fix issues above")
        return 1

    checks = [
        ("Environment Variables", lambda: check_environment_variables(config)),
        ("Contract Artifact", lambda: check_contract_artifact(config)),
        ("RPC Connection", lambda: check_rpc_connection(network)),
        ("Deployer Balance", lambda: check_deployer_balance(network))
    ]

    results = []

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func()
            results.append((name, result))
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            results.append((name, False))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy!")
        logger.info("Deploy: python deploy.py")
        return 0
    else:
        logger.error("❌ Not ready - fix issues above")
        return 1


def cli():
    """Console entry point"""
    try:
        config = DeployConfig.from_env()
        configure_logging(config.log_level, config.log_file)
    except (ValueError, OSError) as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    sys.exit(main(config=config))


if __name__ == "__main__":
    cli()
