"""File-backed state store: one file per key."""

import os
import tempfile
from pathlib import Path

from ..utils.errors import StateStoreError
from ..utils.logging import get_logger

logger = get_logger(__name__)

VALUE_SUFFIX = ".value"


class FileStateStore:
    """State store that keeps each value in its own file.

    Keys are hex-encoded into file names, so any string is a safe key. A put
    writes a temporary file in the same directory and renames it over the
    target, which makes each single write all-or-nothing.
    """

    def __init__(self, directory: str | Path = "state"):
        """Initialize file state store."""
        self.directory = Path(directory)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StateStoreError(
                f"Cannot create state directory {self.directory}: {e}"
            ) from e

        logger.info("File state store initialized", directory=str(self.directory))

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if absent."""
        path = self._path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StateStoreError(f"Cannot read state for {key}: {e}", key=key) from e

    def put(self, key: str, value: bytes) -> None:
        """Atomically store ``value`` under ``key``."""
        path = self._path_for(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StateStoreError(f"Cannot write state for {key}: {e}", key=key) from e

        logger.debug("State written", key=key, size=len(value), path=str(path))

    def keys(self) -> list[str]:
        """Return all stored keys in sorted order."""
        return sorted(
            bytes.fromhex(path.name.removesuffix(VALUE_SUFFIX)).decode("utf-8")
            for path in self.directory.glob(f"*{VALUE_SUFFIX}")
        )

    def _path_for(self, key: str) -> Path:
        if not key:
            raise StateStoreError("State key must be a non-empty string", key=key)
        try:
            encoded = key.encode("utf-8")
        except UnicodeEncodeError as e:
            raise StateStoreError(
                f"State key is not valid UTF-8: {key!r}", key=key
            ) from e
        return self.directory / f"{encoded.hex()}{VALUE_SUFFIX}"
