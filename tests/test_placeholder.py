"""Smoke tests to verify the package wiring works."""

import ledger
from ledger.domain.models import Account
from ledger.repositories import AccountRepository, InMemoryAccountRepository
from ledger.services import LedgerService


class TestScaffold:
    """Package-level smoke tests."""

    def test_version(self):
        assert ledger.__version__ == "0.1.0"

    def test_in_memory_repository_satisfies_protocol(self):
        repo: AccountRepository = InMemoryAccountRepository()
        service = LedgerService(account_repo=repo)

        service.open_account("Smoke", 1.0)

        assert repo.get(1) == Account(1, "Smoke", 1.0)
