"""Diamond record model and its persisted encoding."""

from typing import Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..utils.errors import DeserializationError

DOC_TYPE: Final = "diamond"


class DiamondRecord(BaseModel):
    """One diamond and its current owner.

    The record is stored as compact JSON under its ``name``. Keys are written
    in declaration order, so encoding the same record always gives the same
    bytes::

        {"docType":"diamond","name":"asdf","origin":"blue","carats":35,"owner":"bob"}
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    kind: Literal["diamond"] = Field(
        default=DOC_TYPE, alias="docType", description="Record discriminator"
    )
    name: str = Field(..., description="Unique diamond name, also the state key")
    origin: str = Field(..., description="Provenance, stored lowercase")
    weight: int = Field(..., ge=0, alias="carats", description="Weight in carats")
    owner: str = Field(..., description="Current owner, stored lowercase")

    def to_bytes(self) -> bytes:
        """Encode the record for the state store."""
        return self.model_dump_json(by_alias=True).encode("utf-8")

    @classmethod
    def from_bytes(cls, raw: bytes) -> "DiamondRecord":
        """Decode a record read from the state store."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise DeserializationError(
                f"Stored value is not a valid diamond record: {e.error_count()} "
                f"validation error(s), first: {e.errors()[0]['msg']}"
            ) from e

    def with_owner(self, owner: str) -> "DiamondRecord":
        """Return a copy of the record held by a different owner."""
        return self.model_copy(update={"owner": owner})
