"""
Shared test fixtures
"""

import json
import sys
import pytest
from loguru import logger


PROJECT_ABI = [
    {
        "inputs": [],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [],
        "name": "owner",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    }
]


def write_artifact(root, source_name, contract_name, bytecode="0x6080604052348015600f57600080fd5b50", abi=None):
    """Write a Hardhat-style artifact file under root"""
    artifact_dir = root / source_name
    artifact_dir.mkdir(parents=True, exist_ok=True)
    path = artifact_dir / f"{contract_name}.json"
    path.write_text(json.dumps({
        "_format": "hh-sol-artifact-1",
        "contractName": contract_name,
        "sourceName": source_name,
        "abi": PROJECT_ABI if abi is None else abi,
        "bytecode": bytecode,
        "deployedBytecode": bytecode,
        "linkReferences": {},
        "deployedLinkReferences": {}
    }))
    (artifact_dir / f"{contract_name}.dbg.json").write_text(json.dumps({
        "_format": "hh-sol-dbg-1",
        "buildInfo": "../../build-info/abc.json"
    }))
    return path


@pytest.fixture
def artifacts_dir(tmp_path):
    """Compiled artifacts tree with Project and an abstract interface"""
    root = tmp_path / "artifacts"
    write_artifact(root, "contracts/Project.sol", "Project")
    write_artifact(root, "contracts/IProject.sol", "IProject", bytecode="0x", abi=[])
    build_info = root / "build-info"
    build_info.mkdir()
    (build_info / "abc.json").write_text(json.dumps({"id": "abc"}))
    return root


@pytest.fixture
def log_messages():
    """Capture loguru messages"""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def restore_logging():
    """Reinstate a plain stderr handler after configure_logging() replaced the sinks"""
    yield
    logger.remove()
    logger.add(sys.__stderr__)
