"""Domain models package."""

from ledger.domain.models.enums import CourseType
from ledger.domain.models.account import Account, UNASSIGNED_ID
from ledger.domain.models.course import Course, Workshop, Seminar

__all__ = [
    "CourseType",
    "Account",
    "UNASSIGNED_ID",
    "Course",
    "Workshop",
    "Seminar",
]
