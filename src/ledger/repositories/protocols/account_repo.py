"""Account repository protocol."""

from contextlib import AbstractContextManager
from typing import Protocol, Optional

from ledger.domain.models import Account
from ledger.domain.views import AccountView


class AccountRepository(Protocol):
    """Interface for account storage."""

    @property
    def next_id(self) -> int:
        """Id the next auto-assigned account will receive."""
        ...

    def insert(self, account: Account) -> int:
        """Store a new account and return its final id."""
        ...

    def remove(self, account_id: int) -> Account:
        """Remove an account and hand the record back to the caller."""
        ...

    def get(self, account_id: int) -> Optional[AccountView]:
        """Read-only view of an account, or None."""
        ...

    def get_mutable(self, account_id: int) -> Optional[Account]:
        """The stored account itself, or None."""
        ...

    def edit(self, account_id: int) -> AbstractContextManager[Account]:
        """Scoped exclusive access to a stored account."""
        ...

    def list_all(self) -> list[AccountView]:
        """Read-only views of every stored account, in no particular order."""
        ...

    def update_balance(self, account_id: int, new_balance: float) -> None:
        """Overwrite an account's balance."""
        ...

    def __len__(self) -> int:
        ...

    def __contains__(self, account_id: object) -> bool:
        ...
