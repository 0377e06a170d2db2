from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SurveyRecord(BaseModel):
    """Row sent to the response store for one completed survey.

    Attributes are snake_case; the serialised keys are the camelCase field
    ids used by the survey, plus a ``submitted_at`` timestamp column.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    overall_enjoyment: str = Field(..., min_length=1)
    organization_quality: str = Field(..., min_length=1)
    support_satisfaction: str = Field(..., min_length=1)
    schedule_timeliness: str = Field(..., min_length=1)
    delays_comment: str = ""
    communication: str = Field(..., min_length=1)
    troubleshooting: str = Field(..., min_length=1)
    issues_comment: str = ""
    venue_setup: str = Field(..., min_length=1)
    layout_comment: str = ""
    backup_strategies: str = Field(..., min_length=1)
    backup_comment: str = ""
    general_feedback: str = ""
    submitted_at: str = Field(..., alias="submitted_at", min_length=1)

    @classmethod
    def from_response(cls, response: Mapping[str, str | None], submitted_at: datetime) -> "SurveyRecord":
        """Build a record from a survey response captured at ``submitted_at``."""

        payload: dict[str, Any] = {key: value or "" for key, value in response.items()}
        payload["submitted_at"] = submitted_at.isoformat()
        return cls.model_validate(payload)

    def to_row(self) -> dict[str, str]:
        """Return the record keyed by store column names."""

        return self.model_dump(by_alias=True)


__all__ = ["SurveyRecord"]
