"""State store interface consumed by the asset operations."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StateStore(Protocol):
    """Key-value state accessor.

    Implementations raise ``StateStoreError`` when a read or write fails.
    Atomicity of a single ``put`` and conflict detection between concurrent
    invocations are the store's responsibility.
    """

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if absent."""
        ...

    def put(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...
