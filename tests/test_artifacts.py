"""
Unit Tests for Artifact Provider
"""

import json
import pytest

from blockchain.artifacts import ArtifactProvider
from utils.exceptions import DeploymentError
from conftest import write_artifact


class TestArtifactProvider:
    """Test Hardhat artifact lookup"""

    def test_get_artifact_by_name(self, artifacts_dir):
        """Bare name resolves to the single matching artifact"""
        provider = ArtifactProvider(str(artifacts_dir))

        artifact = provider.get_artifact("Project")

        assert artifact.contract_name == "Project"
        assert artifact.source_name == "contracts/Project.sol"
        assert artifact.fully_qualified_name == "contracts/Project.sol:Project"
        assert artifact.bytecode.startswith("0x6080")
        assert artifact.is_deployable
        assert artifact.path == artifacts_dir / "contracts/Project.sol" / "Project.json"

    def test_get_artifact_fully_qualified(self, artifacts_dir):
        provider = ArtifactProvider(str(artifacts_dir))

        artifact = provider.get_artifact("contracts/Project.sol:Project")

        assert artifact.contract_name == "Project"

    def test_missing_artifact(self, artifacts_dir):
        provider = ArtifactProvider(str(artifacts_dir))

        with pytest.raises(DeploymentError, match="Artifact for contract Missing not found"):
            provider.get_artifact("Missing")

        with pytest.raises(DeploymentError, match="not found"):
            provider.get_artifact("contracts/Missing.sol:Missing")

    def test_missing_artifacts_dir(self, tmp_path):
        provider = ArtifactProvider(str(tmp_path / "nowhere"))

        with pytest.raises(DeploymentError, match="hardhat compile"):
            provider.get_artifact("Project")

    def test_ambiguous_name(self, artifacts_dir):
        """Same contract name in two sources needs a qualified name"""
        write_artifact(artifacts_dir, "contracts/legacy/Project.sol", "Project")
        provider = ArtifactProvider(str(artifacts_dir))

        with pytest.raises(DeploymentError) as exc_info:
            provider.get_artifact("Project")

        message = str(exc_info.value)
        assert "contracts/Project.sol:Project" in message
        assert "contracts/legacy/Project.sol:Project" in message

        artifact = provider.get_artifact("contracts/legacy/Project.sol:Project")
        assert artifact.source_name == "contracts/legacy/Project.sol"

    def test_abstract_contract_not_deployable(self, artifacts_dir):
        provider = ArtifactProvider(str(artifacts_dir))

        artifact = provider.get_artifact("IProject")

        assert not artifact.is_deployable

    def test_malformed_artifact(self, artifacts_dir):
        bad_dir = artifacts_dir / "contracts/Bad.sol"
        bad_dir.mkdir(parents=True)
        (bad_dir / "Bad.json").write_text(json.dumps({"contractName": "Bad"}))
        (bad_dir / "Broken.json").write_text("{not json")
        provider = ArtifactProvider(str(artifacts_dir))

        with pytest.raises(DeploymentError, match="no abi/bytecode"):
            provider.get_artifact("Bad")

        with pytest.raises(DeploymentError, match="Cannot read artifact"):
            provider.get_artifact("Broken")

    def test_list_contracts_skips_debug_and_build_info(self, artifacts_dir):
        provider = ArtifactProvider(str(artifacts_dir))

        assert provider.list_contracts() == [
            "contracts/IProject.sol:IProject",
            "contracts/Project.sol:Project"
        ]


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
