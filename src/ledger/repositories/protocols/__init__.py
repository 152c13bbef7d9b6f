"""Repository protocol definitions (interfaces)."""

from ledger.repositories.protocols.account_repo import AccountRepository

__all__ = [
    "AccountRepository",
]
