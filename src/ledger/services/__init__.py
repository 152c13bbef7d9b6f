"""Service layer - business logic orchestration."""

from ledger.services.ledger_service import LedgerService
from ledger.services.catalog_service import CatalogService

__all__ = [
    "LedgerService",
    "CatalogService",
]
