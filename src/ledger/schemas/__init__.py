"""Pydantic output schemas."""

from ledger.schemas.account import AccountResponse, AccountListResponse
from ledger.schemas.course import CourseOverviewResponse

__all__ = [
    "AccountResponse",
    "AccountListResponse",
    "CourseOverviewResponse",
]
