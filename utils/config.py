"""
Deployment Configuration
Loads deployer settings from the environment (.env supported)
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from utils.logging_config import level_number

load_dotenv()


DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_CONTRACT_NAME = "Project"
DEFAULT_GAS_BUFFER = 1.2
DEFAULT_FALLBACK_GAS_LIMIT = 3_000_000
DEFAULT_CONFIRMATION_TIMEOUT = 300

TRUTHY = ('1', 'true', 'yes', 'on')


def _get_int(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw, 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    return raw.strip().lower() in TRUTHY


@dataclass
class DeployConfig:
    """
    Settings for a single deployment run

    Every field maps to an environment variable, see from_env().
    """

    rpc_url: str = DEFAULT_RPC_URL
    network_name: str = "localhost"
    private_key: Optional[str] = None
    contract_name: str = DEFAULT_CONTRACT_NAME
    artifacts_dir: str = "artifacts"
    chain_id: Optional[int] = None
    gas_limit: Optional[int] = None
    gas_buffer: float = DEFAULT_GAS_BUFFER
    fallback_gas_limit: int = DEFAULT_FALLBACK_GAS_LIMIT
    confirmation_timeout: int = DEFAULT_CONFIRMATION_TIMEOUT
    save_address: bool = False
    address_env_key: str = "PROJECT_CONTRACT_ADDRESS"
    env_file: str = ".env"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "DeployConfig":
        """
        Build config from environment variables

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        config = cls(
            rpc_url=os.getenv('RPC_URL') or DEFAULT_RPC_URL,
            network_name=os.getenv('NETWORK_NAME') or "localhost",
            private_key=os.getenv('DEPLOYER_PRIVATE_KEY') or None,
            contract_name=os.getenv('CONTRACT_NAME') or DEFAULT_CONTRACT_NAME,
            artifacts_dir=os.getenv('ARTIFACTS_DIR') or "artifacts",
            chain_id=_get_int('CHAIN_ID'),
            gas_limit=_get_int('GAS_LIMIT'),
            gas_buffer=_get_float('GAS_BUFFER', DEFAULT_GAS_BUFFER),
            fallback_gas_limit=_get_int('FALLBACK_GAS_LIMIT', DEFAULT_FALLBACK_GAS_LIMIT),
            confirmation_timeout=_get_int('CONFIRMATION_TIMEOUT', DEFAULT_CONFIRMATION_TIMEOUT),
            save_address=_get_bool('SAVE_ADDRESS_TO_ENV'),
            address_env_key=os.getenv('CONTRACT_ADDRESS_ENV_KEY') or "PROJECT_CONTRACT_ADDRESS",
            env_file=os.getenv('ENV_FILE') or ".env",
            log_level=os.getenv('LOG_LEVEL') or "INFO",
            log_file=os.getenv('LOG_FILE') or None
        )

        if config.gas_buffer < 1.0:
            raise ValueError(f"GAS_BUFFER must be at least 1.0, got {config.gas_buffer}")

        try:
            level_number(config.log_level)
        except ValueError:
            raise ValueError(f"LOG_LEVEL {config.log_level!r} is not a log level") from None

        return config
