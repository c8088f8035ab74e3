"""
Utilities Package
Configuration, logging setup and error types for the deployer
"""

from .config import DeployConfig
from .exceptions import DeploymentError, describe_error
from .env_file import update_env_file
from .logging_config import announce, configure_logging

__all__ = [
    'DeployConfig',
    'DeploymentError',
    'describe_error',
    'update_env_file',
    'announce',
    'configure_logging'
]
