"""
Artifact Provider
Resolves compiled Hardhat contract artifacts by name
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional
from loguru import logger

from utils.exceptions import DeploymentError


BUILD_INFO_DIR = 'build-info'
DEBUG_SUFFIX = '.dbg.json'


@dataclass
class ContractArtifact:
    """Compiled contract template (ABI + creation bytecode)"""

    contract_name: str
    source_name: str
    abi: List[Dict]
    bytecode: str
    path: Optional[Path] = field(default=None, compare=False)

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.source_name}:{self.contract_name}"

    @property
    def is_deployable(self) -> bool:
        """Abstract contracts and interfaces compile to empty bytecode"""
        return self.bytecode not in ('', '0x')


class ArtifactProvider:
    """
    Looks up artifacts produced by `npx hardhat compile`

    Layout: <artifacts_dir>/<source_name>/<ContractName>.json
    """

    def __init__(self, artifacts_dir: str = 'artifacts'):
        """
        Initialize Artifact Provider

        Args:
            artifacts_dir: Root of the compiled artifacts tree
        """
        self.artifacts_dir = Path(artifacts_dir)

    def get_artifact(self, name: str) -> ContractArtifact:
        """
        Resolve an artifact by contract name

        Args:
            name: Bare name ("Project") or fully qualified
                  name ("contracts/Project.sol:Project")

        Returns:
            ContractArtifact

        Raises:
            DeploymentError: If the artifact is missing, ambiguous or malformed
        """
        self._check_artifacts_dir()

        if ':' in name:
            source_name, contract_name = name.rsplit(':', 1)
            path = self.artifacts_dir / source_name / f"{contract_name}.json"
            if not path.is_file():
                raise DeploymentError(f"Artifact for contract {name} not found")
            return self._load(path)

        matches = [
            path for path in self.artifacts_dir.rglob(f"{name}.json")
            if self._is_artifact_file(path)
        ]

        if not matches:
            raise DeploymentError(
                f"Artifact for contract {name} not found in {self.artifacts_dir}"
            )

        if len(matches) > 1:
            candidates = sorted(self._qualified_name(path) for path in matches)
            raise DeploymentError(
                f"Multiple artifacts for contract {name}, use a fully qualified name: "
                + ', '.join(candidates)
            )

        return self._load(matches[0])

    def list_contracts(self) -> List[str]:
        """Get fully qualified names of all compiled contracts"""
        self._check_artifacts_dir()

        return sorted(
            self._qualified_name(path)
            for path in self.artifacts_dir.rglob('*.json')
            if self._is_artifact_file(path)
        )

    def _check_artifacts_dir(self):
        if not self.artifacts_dir.is_dir():
            raise DeploymentError(
                f"Artifacts directory not found: {self.artifacts_dir} "
                "(run 'npx hardhat compile' first)"
            )

    def _is_artifact_file(self, path: Path) -> bool:
        if path.name.endswith(DEBUG_SUFFIX):
            return False
        relative = path.relative_to(self.artifacts_dir)
        return BUILD_INFO_DIR not in relative.parts[:-1]

    def _qualified_name(self, path: Path) -> str:
        source_name = path.parent.relative_to(self.artifacts_dir).as_posix()
        return f"{source_name}:{path.stem}"

    def _load(self, path: Path) -> ContractArtifact:
        """Parse an artifact JSON file"""
        try:
            with open(path, 'r') as f:
                contract_json = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DeploymentError(f"Cannot read artifact {path}: {e}") from e

        if 'abi' not in contract_json or 'bytecode' not in contract_json:
            raise DeploymentError(f"Artifact {path} has no abi/bytecode")

        source_name = contract_json.get(
            'sourceName',
            path.parent.relative_to(self.artifacts_dir).as_posix()
        )

        artifact = ContractArtifact(
            contract_name=contract_json.get('contractName', path.stem),
            source_name=source_name,
            abi=contract_json['abi'],
            bytecode=contract_json['bytecode'],
            path=path
        )

        logger.debug(f"Loaded artifact {artifact.fully_qualified_name} from {path}")
        return artifact
