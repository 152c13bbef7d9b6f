"""Catalog service for course overviews."""

import logging
from collections.abc import Iterable

from ledger.core.exceptions import IncompleteCourseError
from ledger.domain.models import Course
from ledger.schemas import CourseOverviewResponse

logger = logging.getLogger(__name__)


class CatalogService:
    """Formats course overviews for display."""

    def describe(self, course: Course) -> str:
        """Overview line, or ``"Error: ..."`` when the course is incomplete."""
        try:
            return course.get_overview()
        except IncompleteCourseError as exc:
            logger.warning("Skipping incomplete %s: %s", course.kind.value, exc.message)
            return f"Error: {exc.message}"

    def describe_all(self, courses: Iterable[Course]) -> list[str]:
        return [self.describe(course) for course in courses]

    def overview(self, course: Course) -> CourseOverviewResponse:
        """Structured overview, carrying the error message instead of raising."""
        try:
            text = course.get_overview()
        except IncompleteCourseError as exc:
            return CourseOverviewResponse(
                kind=course.kind,
                title=course.title,
                error=exc.message,
            )
        return CourseOverviewResponse(kind=course.kind, title=course.title, overview=text)
