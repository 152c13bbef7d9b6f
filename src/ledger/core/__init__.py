"""Core utilities and shared functionality."""

from ledger.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    DuplicateIdError,
    BorrowError,
    IncompleteCourseError,
)

__all__ = [
    "AppError",
    "ValidationError",
    "NotFoundError",
    "DuplicateIdError",
    "BorrowError",
    "IncompleteCourseError",
]
