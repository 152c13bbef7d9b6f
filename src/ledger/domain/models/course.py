"""Course catalog domain models."""

from dataclasses import dataclass
from typing import Protocol

from ledger.core.exceptions import IncompleteCourseError
from ledger.domain.models.enums import CourseType


class Course(Protocol):
    """Anything the catalog can describe with a one-line overview."""

    title: str

    @property
    def kind(self) -> CourseType:
        ...

    def get_overview(self) -> str:
        """Return the overview line, or raise IncompleteCourseError."""
        ...


@dataclass
class Workshop:
    """Hands-on session led by an instructor."""

    title: str
    instructor: str
    duration: str  # hours

    @property
    def kind(self) -> CourseType:
        return CourseType.WORKSHOP

    def get_overview(self) -> str:
        if not (self.title and self.instructor and self.duration):
            raise IncompleteCourseError("Workshop details are incomplete")
        return (
            f"Workshop: {self.title}, Instructor: {self.instructor}, "
            f"Duration: {self.duration} hours"
        )


@dataclass
class Seminar:
    """Talk given by a speaker at a fixed location."""

    title: str
    speaker: str
    location: str

    @property
    def kind(self) -> CourseType:
        return CourseType.SEMINAR

    def get_overview(self) -> str:
        if not (self.title and self.speaker and self.location):
            raise IncompleteCourseError("Seminar details are incomplete")
        return (
            f"Seminar: {self.title}, Speaker: {self.speaker}, "
            f"Location: {self.location}"
        )
