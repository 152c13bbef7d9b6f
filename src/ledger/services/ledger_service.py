"""Ledger service for account management."""

import logging
from typing import Optional

from ledger.core.exceptions import NotFoundError
from ledger.domain.models import Account, UNASSIGNED_ID
from ledger.domain.views import AccountView
from ledger.repositories.protocols import AccountRepository
from ledger.schemas import AccountListResponse, AccountResponse

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Service for opening, adjusting and closing accounts.

    Thin layer over an AccountRepository: lookups that the repository
    answers with ``None`` become ``NotFoundError`` here, and every mutation
    is logged.
    """

    def __init__(self, account_repo: AccountRepository):
        self._account_repo = account_repo

    def open_account(
        self,
        name: str,
        balance: float = 0.0,
        account_id: int = UNASSIGNED_ID,
    ) -> AccountView:
        """
        Open a new account.

        Args:
            name: Display name (need not be unique)
            balance: Opening balance
            account_id: Explicit id, or UNASSIGNED_ID to auto-assign

        Returns:
            View of the stored account
        """
        new_id = self._account_repo.insert(
            Account(account_id=account_id, name=name, balance=balance)
        )
        logger.info("Opened account %s (%s) with balance %s", new_id, name, balance)
        return self.get_account(new_id)

    def get_account(self, account_id: int) -> AccountView:
        """Get account by ID."""
        account = self._account_repo.get(account_id)
        if account is None:
            raise NotFoundError("Account", account_id)
        return account

    def find_account(self, account_id: int) -> Optional[AccountView]:
        """Get account by ID, or None if it does not exist."""
        return self._account_repo.get(account_id)

    def list_accounts(self) -> list[AccountView]:
        """List all accounts."""
        return self._account_repo.list_all()

    def set_balance(self, account_id: int, balance: float) -> AccountView:
        """Overwrite an account's balance."""
        self._account_repo.update_balance(account_id, balance)
        logger.info("Set balance of account %s to %s", account_id, balance)
        return self.get_account(account_id)

    def rename_account(self, account_id: int, name: str) -> AccountView:
        """Change an account's display name."""
        with self._account_repo.edit(account_id) as account:
            old_name = account.name
            account.name = name
        logger.info("Renamed account %s from %r to %r", account_id, old_name, name)
        return self.get_account(account_id)

    def close_account(self, account_id: int) -> Account:
        """Remove an account and return its final state."""
        account = self._account_repo.remove(account_id)
        logger.info("Closed account %s (%s)", account_id, account.name)
        return account

    def summarize(self) -> AccountListResponse:
        """Serializable listing of all accounts."""
        accounts = [
            AccountResponse.model_validate(view) for view in self.list_accounts()
        ]
        return AccountListResponse(accounts=accounts, count=len(accounts))
