"""
Network Client
Web3 connection, deployer account and factory lookup
"""

from typing import Optional
from web3 import Web3
from eth_account import Account
from loguru import logger

from blockchain.artifacts import ArtifactProvider
from blockchain.contract_factory import ContractFactory
from utils.config import DeployConfig
from utils.exceptions import DeploymentError


class NetworkClient:
    """
    Connection to the target network

    Signs with DEPLOYER_PRIVATE_KEY when set, otherwise uses the node's
    first unlocked account (local Hardhat node).
    """

    def __init__(
        self,
        config: DeployConfig,
        w3: Optional[Web3] = None,
        artifact_provider: Optional[ArtifactProvider] = None
    ):
        """
        Initialize Network Client

        Args:
            config: Deployment configuration
            w3: Pre-built Web3 instance (None = HTTP provider from config)
            artifact_provider: Artifact lookup (None = config.artifacts_dir)
        """
        self.config = config
        self.w3 = w3 or Web3(Web3.HTTPProvider(config.rpc_url))
        self.artifact_provider = artifact_provider or ArtifactProvider(config.artifacts_dir)

        self.account = Account.from_key(config.private_key) if config.private_key else None
        self.chain_id = config.chain_id
        self.connected = False
        self._deployer_address = None

    def connect(self):
        """
        Verify the RPC endpoint and resolve chain id

        Raises:
            DeploymentError: If the endpoint is unreachable
        """
        if self.connected:
            return

        if not self.w3.is_connected():
            raise DeploymentError(
                f"Failed to connect to network {self.config.network_name} at {self.config.rpc_url}"
            )

        if self.chain_id is None:
            self.chain_id = self.w3.eth.chain_id

        self.connected = True
        logger.info(f"Connected to {self.config.network_name} (chain id {self.chain_id})")

    @property
    def deployer_address(self) -> str:
        """Address of the signer paying for deployments"""
        if self._deployer_address:
            return self._deployer_address

        if self.account is not None:
            self._deployer_address = self.account.address
        else:
            accounts = self.w3.eth.accounts
            if not accounts:
                raise DeploymentError(
                    "DEPLOYER_PRIVATE_KEY not set and the node has no unlocked accounts"
                )
            self._deployer_address = Web3.to_checksum_address(accounts[0])

        return self._deployer_address

    def get_balance(self, address: Optional[str] = None) -> int:
        """
        Get native balance

        Args:
            address: Account to query (None = deployer)

        Returns:
            Balance in wei
        """
        return self.w3.eth.get_balance(address or self.deployer_address)

    async def get_contract_factory(self, name: str) -> ContractFactory:
        """
        Get a deployable factory for a compiled contract

        Args:
            name: Bare or fully qualified contract name

        Returns:
            ContractFactory bound to the deployer
        """
        artifact = self.artifact_provider.get_artifact(name)
        self.connect()

        return ContractFactory(
            self.w3,
            artifact,
            self.deployer_address,
            account=self.account,
            chain_id=self.chain_id,
            config=self.config
        )
