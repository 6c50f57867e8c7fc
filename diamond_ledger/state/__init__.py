"""State store adapters for the diamond ledger."""

from ..utils.config import StateConfig
from .base import StateStore
from .filesystem import FileStateStore
from .memory import InMemoryStateStore


def create_state_store(config: StateConfig) -> StateStore:
    """Build the state store selected by configuration."""
    if config.backend == "memory":
        return InMemoryStateStore()
    return FileStateStore(config.directory)


__all__ = ["FileStateStore", "InMemoryStateStore", "StateStore", "create_state_store"]
