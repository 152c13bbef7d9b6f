"""Enumerations for domain models."""

from enum import Enum


class CourseType(str, Enum):
    """Kinds of course offered in the catalog."""

    WORKSHOP = "WORKSHOP"
    SEMINAR = "SEMINAR"
