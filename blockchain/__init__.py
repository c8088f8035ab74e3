"""
Blockchain Interaction Package
Handles artifact lookup, contract deployment and network access
"""

from .artifacts import ArtifactProvider, ContractArtifact
from .contract_factory import ContractFactory, DeployedContract
from .network import NetworkClient

__all__ = [
    'ArtifactProvider',
    'ContractArtifact',
    'ContractFactory',
    'DeployedContract',
    'NetworkClient'
]
