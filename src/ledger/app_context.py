"""Application context for in-process service management.

Provides a single place to build the repository and services, so the CLI
and tests share the same wiring.
"""

from typing import Optional

from ledger.config.settings import Settings, get_settings, set_settings
from ledger.repositories.memory import InMemoryAccountRepository
from ledger.services import CatalogService, LedgerService


class AppContext:
    """
    Application context providing access to the repository and services.

    Each context owns one in-memory repository; nothing outlives the
    process.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize application context.

        Args:
            settings: Optional settings. Installed as the global settings when
                given; otherwise the current global settings are used.
        """
        if settings is not None:
            set_settings(settings)

        self._account_repo: Optional[InMemoryAccountRepository] = None
        self._ledger_service: Optional[LedgerService] = None
        self._catalog_service: Optional[CatalogService] = None

    @property
    def settings(self) -> Settings:
        return get_settings()

    @property
    def accounts(self) -> InMemoryAccountRepository:
        """Get the account repository."""
        if self._account_repo is None:
            self._account_repo = InMemoryAccountRepository()
        return self._account_repo

    @property
    def ledger(self) -> LedgerService:
        """Get the LedgerService instance."""
        if self._ledger_service is None:
            self._ledger_service = LedgerService(account_repo=self.accounts)
        return self._ledger_service

    @property
    def catalog(self) -> CatalogService:
        """Get the CatalogService instance."""
        if self._catalog_service is None:
            self._catalog_service = CatalogService()
        return self._catalog_service

    def reset(self) -> None:
        """Drop the repository and services, starting from an empty ledger."""
        self._account_repo = None
        self._ledger_service = None
        self._catalog_service = None
