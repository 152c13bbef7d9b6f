"""In-memory repository implementations."""

from ledger.repositories.memory.account_repo import (
    InMemoryAccountRepository,
    FIRST_ACCOUNT_ID,
)

__all__ = [
    "InMemoryAccountRepository",
    "FIRST_ACCOUNT_ID",
]
