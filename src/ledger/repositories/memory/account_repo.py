"""In-memory implementation of AccountRepository."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from typing import Optional

from ledger.core.exceptions import BorrowError, DuplicateIdError, NotFoundError
from ledger.domain.models import Account, UNASSIGNED_ID
from ledger.domain.views import AccountView

FIRST_ACCOUNT_ID = 1


class InMemoryAccountRepository:
    """
    Dict-backed account repository.

    Owns every stored ``Account``: ``insert`` keeps its own instance, so the
    caller's object is never aliased. Ids handed out by auto-assignment are
    never reused, even after the account is removed.

    Stored accounts have their id pinned, so a mutable handle cannot move a
    record away from its key.

    Explicit ids do not move the counter, so an auto-assigned id can land on
    a manually chosen one; that insert fails with ``DuplicateIdError``.
    """

    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}
        self._next_id = FIRST_ACCOUNT_ID
        self._borrowed: set[int] = set()

    @property
    def next_id(self) -> int:
        """Id the next auto-assigned account will receive."""
        return self._next_id

    def insert(self, account: Account) -> int:
        """
        Store a new account.

        An account with ``UNASSIGNED_ID`` takes the next counter value; the
        counter advances even if the insert then fails.

        Returns:
            The id the account is stored under.

        Raises:
            DuplicateIdError: another account already has the id.
        """
        account_id = account.account_id
        if account_id == UNASSIGNED_ID:
            account_id = self._next_id
            self._next_id += 1

        if account_id in self._accounts:
            raise DuplicateIdError("Account", account_id)

        stored = replace(account, account_id=account_id)
        stored.pin_id()
        self._accounts[account_id] = stored
        return account_id

    def remove(self, account_id: int) -> Account:
        """Remove an account and return the stored record."""
        if account_id not in self._accounts:
            raise NotFoundError("Account", account_id)
        if account_id in self._borrowed:
            raise BorrowError("Account", account_id)
        account = self._accounts.pop(account_id)
        account.unpin_id()
        return account

    def get(self, account_id: int) -> Optional[AccountView]:
        """Read-only view of an account, or None."""
        account = self._accounts.get(account_id)
        return AccountView(account) if account is not None else None

    def get_mutable(self, account_id: int) -> Optional[Account]:
        """
        Return the stored account itself so callers can change it in place.

        The handle is not tracked: unlike ``edit``, it does not keep other
        writers out, and holding it does not block a later ``edit``. Its id
        stays pinned, so writes can only reach ``name`` and ``balance``.
        Raises ``BorrowError`` only while an ``edit`` of the same id is open.
        """
        if account_id in self._borrowed:
            raise BorrowError("Account", account_id)
        return self._accounts.get(account_id)

    @contextmanager
    def edit(self, account_id: int) -> Iterator[Account]:
        """
        Hold exclusive write access to one account for the ``with`` block.

        While the block runs, ``edit``, ``get_mutable`` and ``remove`` on the
        same id raise ``BorrowError``.
        """
        account = self._accounts.get(account_id)
        if account is None:
            raise NotFoundError("Account", account_id)
        if account_id in self._borrowed:
            raise BorrowError("Account", account_id)

        self._borrowed.add(account_id)
        try:
            yield account
        finally:
            self._borrowed.discard(account_id)

    def list_all(self) -> list[AccountView]:
        """Read-only views of every stored account, in no particular order."""
        return [AccountView(account) for account in self._accounts.values()]

    def update_balance(self, account_id: int, new_balance: float) -> None:
        """Overwrite an account's balance; negative values are allowed."""
        account = self._accounts.get(account_id)
        if account is None:
            raise NotFoundError("Account", account_id)
        account.balance = new_balance

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    def __repr__(self) -> str:
        return (
            f"InMemoryAccountRepository(accounts={len(self._accounts)}, "
            f"next_id={self._next_id})"
        )
