"""
Contract Factory
Builds, signs and submits contract creation transactions
"""

from typing import Optional
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.exceptions import TimeExhausted
from loguru import logger

from blockchain.artifacts import ContractArtifact
from utils.config import DeployConfig
from utils.exceptions import DeploymentError


class DeployedContract:
    """
    Handle for a submitted deployment

    The receipt stays None until wait_for_deployment() confirms the transaction.
    """

    def __init__(
        self,
        w3: Web3,
        artifact: ContractArtifact,
        transaction_hash: bytes,
        confirmation_timeout: int
    ):
        self.w3 = w3
        self.artifact = artifact
        self.transaction_hash = transaction_hash
        self.confirmation_timeout = confirmation_timeout
        self.receipt = None

    @property
    def tx_hash_hex(self) -> str:
        return Web3.to_hex(self.transaction_hash)

    async def wait_for_deployment(self) -> "DeployedContract":
        """
        Block until the deployment transaction is mined

        Returns:
            self, once confirmed

        Raises:
            DeploymentError: On timeout or reverted transaction
        """
        if self.receipt is not None:
            return self

        logger.info("Waiting for confirmation...")

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                self.transaction_hash,
                timeout=self.confirmation_timeout
            )
        except TimeExhausted as e:
            raise DeploymentError(
                f"Deployment transaction {self.tx_hash_hex} not confirmed "
                f"within {self.confirmation_timeout} seconds"
            ) from e

        if receipt['status'] != 1:
            raise DeploymentError(f"Deployment transaction {self.tx_hash_hex} reverted")

        self.receipt = receipt
        logger.info(f"Confirmed in block {receipt.get('blockNumber')}, gas used: {receipt.get('gasUsed')}")
        return self

    async def get_address(self) -> str:
        """Get checksummed address of the deployed contract"""
        if self.receipt is None:
            raise DeploymentError(
                f"{self.artifact.contract_name} is not deployed yet, "
                "call wait_for_deployment() first"
            )

        address = self.receipt.get('contractAddress')
        if not address:
            raise DeploymentError(f"Receipt for {self.tx_hash_hex} has no contract address")

        return Web3.to_checksum_address(address)

    @property
    def contract(self):
        """web3 contract instance bound to the deployed address"""
        if self.receipt is None:
            raise DeploymentError(f"{self.artifact.contract_name} is not deployed yet")

        return self.w3.eth.contract(
            address=Web3.to_checksum_address(self.receipt['contractAddress']),
            abi=self.artifact.abi
        )


class ContractFactory:
    """
    Deployable contract template bound to a signer
    """

    def __init__(
        self,
        w3: Web3,
        artifact: ContractArtifact,
        deployer_address: str,
        account: Optional[LocalAccount] = None,
        chain_id: Optional[int] = None,
        config: Optional[DeployConfig] = None
    ):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            artifact: Compiled contract artifact
            deployer_address: Address paying for the deployment
            account: Local account for signing (None = node-managed account)
            chain_id: Chain id for replay protection
            config: Gas and confirmation settings
        """
        self.w3 = w3
        self.artifact = artifact
        self.deployer_address = Web3.to_checksum_address(deployer_address)
        self.account = account
        self.chain_id = chain_id
        self.config = config or DeployConfig()

    async def deploy(self, *constructor_args) -> DeployedContract:
        """
        Submit the contract creation transaction (single attempt)

        Args:
            *constructor_args: Arguments for the contract constructor

        Returns:
            DeployedContract pending confirmation
        """
        if not self.artifact.is_deployable:
            raise DeploymentError(
                f"Contract {self.artifact.contract_name} is abstract and can't be deployed"
            )

        Contract = self.w3.eth.contract(abi=self.artifact.abi, bytecode=self.artifact.bytecode)
        constructor = Contract.constructor(*constructor_args)

        logger.info(f"Deploying {self.artifact.contract_name} from: {self.deployer_address}")

        gas_limit = self._get_gas_limit(constructor)
        gas_price = self.w3.eth.gas_price

        logger.info(f"Gas limit: {gas_limit}")
        logger.info(f"Gas price: {Web3.from_wei(gas_price, 'gwei')} gwei")

        self._check_balance(gas_limit, gas_price)

        tx_params = {
            'from': self.deployer_address,
            'gas': gas_limit,
            'gasPrice': gas_price
        }
        if self.chain_id is not None:
            tx_params['chainId'] = self.chain_id

        if self.account is not None:
            tx_params['nonce'] = self.w3.eth.get_transaction_count(
                self.deployer_address,
                'pending'
            )
            transaction = constructor.build_transaction(tx_params)

            logger.debug("Signing transaction...")
            signed_tx = self.account.sign_transaction(transaction)
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        else:
            # Node-managed (unlocked) account signs
            tx_hash = constructor.transact(tx_params)

        deployed = DeployedContract(
            self.w3,
            self.artifact,
            tx_hash,
            self.config.confirmation_timeout
        )
        logger.info(f"Transaction sent: {deployed.tx_hash_hex}")
        return deployed

    def _get_gas_limit(self, constructor) -> int:
        """Estimate gas with buffer, falling back to a fixed limit"""
        if self.config.gas_limit:
            return self.config.gas_limit

        try:
            gas_estimate = constructor.estimate_gas({'from': self.deployer_address})
            return int(gas_estimate * self.config.gas_buffer)
        except Exception as e:
            logger.warning(
                f"Gas estimation failed: {e}, using default {self.config.fallback_gas_limit}"
            )
            return self.config.fallback_gas_limit

    def _check_balance(self, gas_limit: int, gas_price: int):
        """Refuse to submit when the deployer cannot cover the gas"""
        balance = self.w3.eth.get_balance(self.deployer_address)
        required = gas_limit * gas_price

        logger.info(f"Account balance: {Web3.from_wei(balance, 'ether')} ETH")
        logger.info(f"Estimated deployment cost: {Web3.from_wei(required, 'ether')} ETH")

        if balance < required:
            raise DeploymentError(
                f"insufficient funds for deployment: balance {balance} wei, "
                f"need {required} wei"
            )
