"""Pydantic schemas for course overviews."""

from typing import Optional

from pydantic import BaseModel

from ledger.domain.models.enums import CourseType


class CourseOverviewResponse(BaseModel):
    """Overview of one course, or the reason it could not be built."""

    kind: CourseType
    title: str
    overview: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
