"""In-memory state store."""

from ..utils.errors import StateStoreError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class InMemoryStateStore:
    """Dict-backed state store for a single process."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        """Initialize in-memory store."""
        self._values: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if absent."""
        _check_key(key)
        return self._values.get(key)

    def put(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``."""
        _check_key(key)
        self._values[key] = bytes(value)
        logger.debug("State written", key=key, size=len(value))

    def keys(self) -> list[str]:
        """Return all stored keys in sorted order."""
        return sorted(self._values)

    def snapshot(self) -> dict[str, bytes]:
        """Return a copy of every stored key and value."""
        return dict(self._values)


def _check_key(key: str) -> None:
    if not key:
        raise StateStoreError("State key must be a non-empty string", key=key)
