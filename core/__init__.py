"""Core package for survey errors and shared primitives."""

from .errors import SubmissionError, SurveyError, UnknownFieldError

__all__ = ["SubmissionError", "SurveyError", "UnknownFieldError"]
