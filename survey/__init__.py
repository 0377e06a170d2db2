"""Event feedback survey: schema, validation, progress and submission."""

from .navigation import SectionNavigator
from .progress import compute_progress
from .schema import (
    FIELD_IDS,
    OPTIONAL_FIELDS,
    REQUIRED_FIELDS,
    SECTIONS,
    TOTAL_SECTIONS,
    FieldDefinition,
    SectionDefinition,
    empty_response,
    get_field,
)
from .session import SurveySession
from .submission import SubmissionController, SubmissionState, SubmissionStatus
from .validation import REQUIRED_FIELD_MESSAGE, is_field_valid, is_response_submittable

__all__ = [
    "FIELD_IDS",
    "FieldDefinition",
    "OPTIONAL_FIELDS",
    "REQUIRED_FIELDS",
    "REQUIRED_FIELD_MESSAGE",
    "SECTIONS",
    "SectionDefinition",
    "SectionNavigator",
    "SubmissionController",
    "SubmissionState",
    "SubmissionStatus",
    "SurveySession",
    "TOTAL_SECTIONS",
    "compute_progress",
    "empty_response",
    "get_field",
    "is_field_valid",
    "is_response_submittable",
]
