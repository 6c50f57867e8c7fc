"""Type definitions for the diamond ledger."""

from enum import Enum

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """Kinds of failure an invocation can end with."""

    INVALID_ARGUMENTS = "InvalidArguments"
    ALREADY_EXISTS = "AlreadyExists"
    NOT_FOUND = "NotFound"
    STATE_ACCESS_ERROR = "StateAccessError"
    DESERIALIZATION_ERROR = "DeserializationError"
    UNKNOWN_OPERATION = "UnknownOperation"


class InvocationResponse(BaseModel):
    """Outcome of a single invocation."""

    success: bool = Field(..., description="Whether the invocation succeeded")
    payload: bytes | None = Field(None, description="Result bytes, if any")
    error_kind: ErrorKind | None = Field(None, description="Kind of failure")
    message: str = Field("", description="Human-readable message")

    @classmethod
    def ok(cls, payload: bytes | None = None) -> "InvocationResponse":
        """Build a successful response."""
        return cls(success=True, payload=payload)

    @classmethod
    def error(cls, kind: ErrorKind, message: str) -> "InvocationResponse":
        """Build a failed response."""
        return cls(success=False, error_kind=kind, message=message)
