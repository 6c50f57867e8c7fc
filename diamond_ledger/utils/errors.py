"""Exception hierarchy for the diamond ledger."""

from .types import ErrorKind


class LedgerError(Exception):
    """Base class for failures reported back to the caller of an invocation."""

    kind: ErrorKind

    def __init__(self, message: str):
        """Initialize ledger error."""
        super().__init__(message)
        self.message = message


class InvalidArgumentsError(LedgerError):
    """Wrong argument count or a malformed argument value."""

    kind = ErrorKind.INVALID_ARGUMENTS


class AlreadyExistsError(LedgerError):
    """A record already lives under the requested key."""

    kind = ErrorKind.ALREADY_EXISTS


class NotFoundError(LedgerError):
    """No record lives under the requested key."""

    kind = ErrorKind.NOT_FOUND


class StateAccessError(LedgerError):
    """The state store failed a read or a write."""

    kind = ErrorKind.STATE_ACCESS_ERROR


class DeserializationError(LedgerError):
    """Stored bytes are not a valid record encoding."""

    kind = ErrorKind.DESERIALIZATION_ERROR


class UnknownOperationError(LedgerError):
    """The invocation name is not recognized."""

    kind = ErrorKind.UNKNOWN_OPERATION


class StateStoreError(Exception):
    """Raised by state store implementations when a get or put fails."""

    def __init__(self, message: str, key: str | None = None):
        """Initialize state store error."""
        super().__init__(message)
        self.key = key
