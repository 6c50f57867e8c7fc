"""Diamond lifecycle operations against a key-value state store."""

import json
import re
from collections.abc import Sequence

from ..state.base import StateStore
from ..utils.errors import (
    AlreadyExistsError,
    InvalidArgumentsError,
    NotFoundError,
    StateAccessError,
    StateStoreError,
)
from ..utils.logging import get_logger
from .record import DOC_TYPE, DiamondRecord

logger = get_logger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_ORDINALS = ("1st", "2nd", "3rd", "4th")


class AssetOperations:
    """Create, query and transfer diamonds.

    Operations take the raw invocation argument list and keep no record state
    between calls: every call reads what it needs from the store and writes
    back at most one whole record as its last step.
    """

    def __init__(self, store: StateStore):
        """Initialize asset operations over a state store."""
        self.store = store

    def create_asset(self, args: Sequence[str]) -> None:
        """Create a new diamond.

        Expects ``[name, origin, weight, owner]``, e.g.
        ``["asdf", "blue", "35", "bob"]``.
        """
        if len(args) != 4:
            raise InvalidArgumentsError("Incorrect number of arguments. Expecting 4")

        logger.info("Start create diamond")
        for ordinal, value in zip(_ORDINALS, args):
            _require_text(ordinal, value)

        name = args[0]
        origin = args[1].lower()
        weight = _parse_weight(args[2])
        owner = args[3].lower()

        if self._read(name) is not None:
            logger.info("Diamond already exists", name=name)
            raise AlreadyExistsError(f"This diamond already exists: {name}")

        record = DiamondRecord(
            docType=DOC_TYPE, name=name, origin=origin, carats=weight, owner=owner
        )
        self._write(name, record)

        logger.info("End create diamond", name=name, origin=origin, weight=weight)

    def query_asset(self, args: Sequence[str]) -> bytes:
        """Return the stored bytes of one diamond, unchanged."""
        if len(args) != 1:
            raise InvalidArgumentsError(
                "Incorrect number of arguments. Expecting name of the diamond to query"
            )

        name = args[0]
        _require_text("1st", name)

        try:
            value = self.store.get(name)
        except StateStoreError as e:
            raise StateAccessError(
                _error_document(f"Failed to get state for {name}")
            ) from e

        if value is None:
            raise NotFoundError(_error_document(f"Diamond does not exist: {name}"))

        return value

    def transfer_asset(self, args: Sequence[str]) -> None:
        """Hand a diamond to a new owner.

        Expects ``[name, new_owner]``. Arguments past the second are ignored.
        """
        if len(args) < 2:
            raise InvalidArgumentsError("Incorrect number of arguments. Expecting 2")

        name = args[0]
        _require_text("1st", name)
        _require_text("2nd", args[1])
        new_owner = args[1].lower()

        logger.info("Start transfer diamond", name=name, new_owner=new_owner)

        value = self._read(name)
        if value is None:
            raise NotFoundError(f"Diamond does not exist: {name}")

        record = DiamondRecord.from_bytes(value)
        self._write(name, record.with_owner(new_owner))

        logger.info("End transfer diamond", name=name, previous_owner=record.owner)

    def _read(self, name: str) -> bytes | None:
        try:
            return self.store.get(name)
        except StateStoreError as e:
            raise StateAccessError(f"Failed to get diamond: {e}") from e

    def _write(self, name: str, record: DiamondRecord) -> None:
        try:
            self.store.put(name, record.to_bytes())
        except StateStoreError as e:
            raise StateAccessError(f"Failed to put diamond: {e}") from e


def _require_text(ordinal: str, value: str) -> None:
    if not value:
        raise InvalidArgumentsError(f"{ordinal} argument must be a non-empty string")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        # Lone surrogates, e.g. from undecodable command-line bytes
        raise InvalidArgumentsError(
            f"{ordinal} argument must be valid UTF-8 text"
        ) from e


def _parse_weight(text: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(text):
        raise InvalidArgumentsError("3rd argument must be a numeric string")
    try:
        weight = int(text)
    except ValueError as e:
        # Digit strings past the interpreter's conversion limit
        raise InvalidArgumentsError("3rd argument must be a numeric string") from e
    if weight < 0:
        raise InvalidArgumentsError("3rd argument must be a non-negative integer")
    return weight


def _error_document(message: str) -> str:
    return json.dumps({"Error": message}, separators=(",", ":"))
