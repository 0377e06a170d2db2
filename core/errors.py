"""Custom exception types for the feedback survey."""

from __future__ import annotations


SUBMISSION_FAILED_PREFIX = "Failed to submit survey"


class SurveyError(Exception):
    """Base exception for survey related issues."""


class UnknownFieldError(SurveyError, KeyError):
    """Raised when a field id is not part of the survey schema."""

    def __init__(self, field_id: str) -> None:
        super().__init__(field_id)
        self.field_id = field_id

    def __str__(self) -> str:
        return f"Unknown survey field: {self.field_id!r}"


class SubmissionError(SurveyError):
    """Raised when the response store could not persist a submission."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"{SUBMISSION_FAILED_PREFIX}: {detail}")
        self.detail = detail
