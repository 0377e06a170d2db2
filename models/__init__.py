"""Pydantic models for survey submission records."""

from .survey import SurveyRecord

__all__ = ["SurveyRecord"]
