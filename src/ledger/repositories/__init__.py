"""Repository layer - data access abstractions and implementations."""

from ledger.repositories.protocols import AccountRepository
from ledger.repositories.memory import InMemoryAccountRepository

__all__ = [
    "AccountRepository",
    "InMemoryAccountRepository",
]
