"""Diamond records and their lifecycle operations."""

from .operations import AssetOperations
from .record import DOC_TYPE, DiamondRecord

__all__ = ["DOC_TYPE", "AssetOperations", "DiamondRecord"]
