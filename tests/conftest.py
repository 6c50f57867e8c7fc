"""Pytest configuration and fixtures."""

import pytest
import structlog
from structlog.testing import LogCapture

from diamond_ledger.chaincode import DiamondChaincode
from diamond_ledger.state import InMemoryStateStore
from diamond_ledger.utils.config import reset_settings


@pytest.fixture(autouse=True)
def set_test_environment(monkeypatch, tmp_path):
    """Set test environment variables."""
    # Ensure test defaults (override .env)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("DEVELOPMENT", "false")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("STATE_BACKEND", "file")
    monkeypatch.setenv("STATE_DIRECTORY", str(tmp_path / "state"))
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def log_output():
    """Capture structlog events instead of printing them."""
    capture = LogCapture()
    structlog.configure(processors=[capture])
    yield capture
    structlog.reset_defaults()


@pytest.fixture
def memory_store() -> InMemoryStateStore:
    """Return an empty in-memory state store."""
    return InMemoryStateStore()


@pytest.fixture
def chaincode(memory_store) -> DiamondChaincode:
    """Return a contract over an empty in-memory store."""
    return DiamondChaincode(memory_store)


@pytest.fixture
def sample_args() -> list[str]:
    """Return createAsset arguments for a sample diamond."""
    return ["asdf", "Blue", "35", "Bob"]
