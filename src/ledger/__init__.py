"""In-memory account ledger and course catalog."""

__version__ = "0.1.0"
