"""View models for repository and service outputs."""

from ledger.domain.views.account import AccountView

__all__ = [
    "AccountView",
]
