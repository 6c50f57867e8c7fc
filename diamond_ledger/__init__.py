"""Diamond ledger: ownership records for named diamonds in a key-value state store."""

__version__ = "0.1.0"
