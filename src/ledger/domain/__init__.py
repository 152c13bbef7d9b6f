"""Domain layer - pure business models with no external dependencies."""

from ledger.domain.models import (
    Account,
    UNASSIGNED_ID,
    Course,
    CourseType,
    Workshop,
    Seminar,
)
from ledger.domain.views import AccountView

__all__ = [
    "Account",
    "UNASSIGNED_ID",
    "AccountView",
    "Course",
    "CourseType",
    "Workshop",
    "Seminar",
]
