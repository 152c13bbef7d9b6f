"""
Pytest configuration and fixtures for account ledger tests.

This module provides:
- Clean settings for every test
- Repository and service fixtures
- Factory helpers for accounts
- Sample courses for the catalog
"""

from typing import Callable

import pytest

from ledger.app_context import AppContext
from ledger.config.settings import reset_settings
from ledger.domain.models import Account, Seminar, UNASSIGNED_ID, Workshop
from ledger.repositories.memory import InMemoryAccountRepository
from ledger.services import CatalogService, LedgerService


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start each test from default settings, ignoring the caller's env."""
    for var in ("LEDGER_LOG_LEVEL", "LEDGER_JSON_OUTPUT", "LEDGER_APP_NAME"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def account_repo() -> InMemoryAccountRepository:
    """Provide an empty in-memory AccountRepository."""
    return InMemoryAccountRepository()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service(account_repo) -> LedgerService:
    """Provide test LedgerService."""
    return LedgerService(account_repo=account_repo)


@pytest.fixture
def catalog_service() -> CatalogService:
    """Provide test CatalogService."""
    return CatalogService()


@pytest.fixture
def app_context() -> AppContext:
    """Provide a fresh AppContext."""
    return AppContext()


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def account_factory(account_repo) -> Callable[..., int]:
    """Factory that inserts an account and returns its id."""

    def _create_account(
        name: str = "Test Account",
        balance: float = 0.0,
        account_id: int = UNASSIGNED_ID,
    ) -> int:
        return account_repo.insert(
            Account(account_id=account_id, name=name, balance=balance)
        )

    return _create_account


# =============================================================================
# PRESET DATA FIXTURES
# =============================================================================


@pytest.fixture
def alice_and_bob(account_factory) -> tuple[int, int]:
    """Insert Alice (1000.0) and Bob (2000.0) with auto-assigned ids."""
    return (
        account_factory(name="Alice", balance=1000.0),
        account_factory(name="Bob", balance=2000.0),
    )


@pytest.fixture
def workshop() -> Workshop:
    return Workshop(
        title="Python Programming Workshop",
        instructor="Alice Smith",
        duration="3",
    )


@pytest.fixture
def seminar() -> Seminar:
    return Seminar(
        title="Advanced Python Seminar",
        speaker="Bob Johnson",
        location="Room 101",
    )
