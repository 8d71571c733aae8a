"""Domain enumerations for training-program records.

Values match what the CRUD layer stores. All are str Enums, so a record
holding a raw string such as "COMPLETED" compares equal to the member.
"""

from enum import Enum


class _ValuesMixin:
    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class EnrollmentStatus(_ValuesMixin, str, Enum):
    """Lifecycle of one participant's enrollment in a cohort."""

    ENROLLED = "ENROLLED"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    DROPPED_OUT = "DROPPED_OUT"
    WITHDRAWN = "WITHDRAWN"


class CohortStatus(_ValuesMixin, str, Enum):
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"


class InternshipStatus(_ValuesMixin, str, Enum):
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    TERMINATED = "TERMINATED"


class EmploymentStatus(_ValuesMixin, str, Enum):
    """Recorded employment result after a program."""

    EMPLOYED = "EMPLOYED"
    SELF_EMPLOYED = "SELF_EMPLOYED"
    UNEMPLOYED = "UNEMPLOYED"
    FURTHER_EDUCATION = "FURTHER_EDUCATION"

    @property
    def is_employed(self) -> bool:
        """True for wage employment and self-employment."""
        return self in (EmploymentStatus.EMPLOYED, EmploymentStatus.SELF_EMPLOYED)


class SurveyType(_ValuesMixin, str, Enum):
    """Survey position in the program timeline."""

    BASELINE = "BASELINE"
    MIDLINE = "MIDLINE"
    ENDLINE = "ENDLINE"
    TRACER = "TRACER"


class SurveyStatus(_ValuesMixin, str, Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"


class QuestionType(_ValuesMixin, str, Enum):
    SCALE = "SCALE"
    SINGLE_CHOICE = "SINGLE_CHOICE"
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    TEXT = "TEXT"
    YES_NO = "YES_NO"
