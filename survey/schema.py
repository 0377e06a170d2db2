"""Static field and section definitions for the event feedback survey.

The survey has a single fixed shape: thirteen fields grouped into three
sections. Single-choice questions are required, free-text questions are
optional. Every other module reads the survey through the constants exported
here so that the response keys always match the union of the field ids.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, Mapping

from core.errors import UnknownFieldError

FieldKind = Literal["single-choice", "free-text"]
Option = tuple[str, str]

SURVEY_TITLE: Final[str] = "US Kids Local Tour Feedback Survey"
SURVEY_INTRO: Final[str] = (
    "Thank you for participating in the US Kids Local Tour! Your feedback is essential for us "
    "to improve future events. Please take a few minutes to complete this survey."
)
OUTCOME_HEADER: Final[str] = "Outcome & Next Steps"
OUTCOME_NOTES: Final[tuple[tuple[str, str], ...]] = (
    (
        "Data-Driven Insights",
        "Your responses will be analyzed to highlight strengths and identify areas for improvement.",
    ),
    (
        "Action Plan",
        "We will use this feedback to refine our processes, update event checklists, adjust "
        "staffing strategies, and improve our communication protocols.",
    ),
    (
        "Continuous Improvement",
        "Regular review meetings will be held to integrate these insights into future event "
        "planning cycles, ensuring that every tournament is progressively better organized.",
    ),
)
FREE_TEXT_PLACEHOLDER: Final[str] = "Type your response here..."


@dataclass(frozen=True)
class FieldDefinition:
    """Immutable descriptor of a single survey question."""

    id: str
    label: str
    kind: FieldKind
    options: tuple[Option, ...] = ()

    @property
    def required(self) -> bool:
        return self.kind == "single-choice"

    def option_label(self, value: str) -> str:
        """Return the display label for ``value`` or ``value`` itself when unknown."""

        for option_value, option_label in self.options:
            if option_value == value:
                return option_label
        return value

    @property
    def option_values(self) -> tuple[str, ...]:
        return tuple(value for value, _ in self.options)


@dataclass(frozen=True)
class SectionDefinition:
    """A titled, ordered group of fields rendered as one survey page."""

    title: str
    fields: tuple[FieldDefinition, ...]

    @property
    def field_ids(self) -> tuple[str, ...]:
        return tuple(field.id for field in self.fields)

    @property
    def required_field_ids(self) -> tuple[str, ...]:
        return tuple(field.id for field in self.fields if field.required)


def _single_choice(field_id: str, label: str, options: tuple[Option, ...]) -> FieldDefinition:
    return FieldDefinition(id=field_id, label=label, kind="single-choice", options=options)


def _free_text(field_id: str, label: str) -> FieldDefinition:
    return FieldDefinition(id=field_id, label=label, kind="free-text")


_QUALITY_SCALE: Final[tuple[Option, ...]] = (
    ("1", "Very Poor"),
    ("2", "Poor"),
    ("3", "Average"),
    ("4", "Good"),
    ("5", "Excellent"),
)
_SATISFACTION_SCALE: Final[tuple[Option, ...]] = (
    ("1", "Very Unsatisfied"),
    ("2", "Unsatisfied"),
    ("3", "Neutral"),
    ("4", "Satisfied"),
    ("5", "Very Satisfied"),
)
_EFFECTIVENESS_SCALE: Final[tuple[Option, ...]] = (
    ("1", "Very Ineffective"),
    ("2", "Ineffective"),
    ("3", "Neutral"),
    ("4", "Effective"),
    ("5", "Very Effective"),
)
_CONTINGENCY_SCALE: Final[tuple[Option, ...]] = (
    ("1", "Not Effective"),
    ("2", "Somewhat Ineffective"),
    ("3", "Neutral"),
    ("4", "Effective"),
    ("5", "Very Effective"),
)
_SCHEDULE_OPTIONS: Final[tuple[Option, ...]] = (
    ("yes", "Yes"),
    ("somewhat", "Somewhat"),
    ("no", "No"),
)


SECTIONS: Final[tuple[SectionDefinition, ...]] = (
    SectionDefinition(
        title="Participant Satisfaction",
        fields=(
            _single_choice(
                "overallEnjoyment",
                "How would you rate your overall enjoyment of the event?",
                _QUALITY_SCALE,
            ),
            _single_choice(
                "organizationQuality",
                "How satisfied were you with the organization of the tournament?",
                _SATISFACTION_SCALE,
            ),
            _single_choice(
                "supportSatisfaction",
                "How would you rate your satisfaction with the registration, check-in process, "
                "and on-site support?",
                _QUALITY_SCALE,
            ),
        ),
    ),
    SectionDefinition(
        title="Logistical Efficiency",
        fields=(
            _single_choice(
                "scheduleTimeliness",
                "Was the event schedule followed as planned?",
                _SCHEDULE_OPTIONS,
            ),
            _free_text(
                "delaysComment",
                "Please elaborate on any delays or issues experienced (optional):",
            ),
            _single_choice(
                "communication",
                "How clear and effective were the communications during the event?",
                _EFFECTIVENESS_SCALE,
            ),
            _single_choice(
                "troubleshooting",
                "How would you rate the handling of any issues or troubleshooting during the event?",
                _QUALITY_SCALE,
            ),
            _free_text(
                "issuesComment",
                "If you experienced any issues, please describe them and how they were resolved "
                "(optional):",
            ),
        ),
    ),
    SectionDefinition(
        title="Overall Event Execution",
        fields=(
            _single_choice(
                "venueSetup",
                "How would you rate the event layout and overall venue setup?",
                _QUALITY_SCALE,
            ),
            _free_text(
                "layoutComment",
                "What improvements would you suggest for the layout or venue (optional):",
            ),
            _single_choice(
                "backupStrategies",
                "How effective were the backup strategies and contingency plans during the event?",
                _CONTINGENCY_SCALE,
            ),
            _free_text(
                "backupComment",
                "Please provide any suggestions for enhancing our backup plans (optional):",
            ),
            _free_text(
                "generalFeedback",
                "Please share any additional comments, suggestions, or areas where you feel we "
                "could improve:",
            ),
        ),
    ),
)

TOTAL_SECTIONS: Final[int] = len(SECTIONS)

FIELDS: Final[Mapping[str, FieldDefinition]] = {
    field.id: field for section in SECTIONS for field in section.fields
}
FIELD_IDS: Final[tuple[str, ...]] = tuple(FIELDS)

# Ordered as the questions appear in the survey.
REQUIRED_FIELDS: Final[tuple[str, ...]] = tuple(
    field_id for field_id, field in FIELDS.items() if field.required
)
OPTIONAL_FIELDS: Final[tuple[str, ...]] = tuple(
    field_id for field_id, field in FIELDS.items() if not field.required
)

_SECTION_BY_FIELD: Final[Mapping[str, int]] = {
    field.id: index for index, section in enumerate(SECTIONS, start=1) for field in section.fields
}


def get_field(field_id: str) -> FieldDefinition:
    """Return the definition for ``field_id``.

    Raises:
        UnknownFieldError: If ``field_id`` is not part of the survey.
    """

    try:
        return FIELDS[field_id]
    except KeyError:
        raise UnknownFieldError(field_id) from None


def get_section(index: int) -> SectionDefinition:
    """Return the 1-based section ``index``."""

    if not 1 <= index <= TOTAL_SECTIONS:
        raise IndexError(f"section index must be between 1 and {TOTAL_SECTIONS}, got {index}")
    return SECTIONS[index - 1]


def section_of(field_id: str) -> int:
    """Return the 1-based index of the section holding ``field_id``."""

    get_field(field_id)
    return _SECTION_BY_FIELD[field_id]


def empty_response() -> dict[str, str]:
    """Return a response mapping with every field present and blank."""

    return {field_id: "" for field_id in FIELD_IDS}


__all__ = [
    "FIELDS",
    "FIELD_IDS",
    "FREE_TEXT_PLACEHOLDER",
    "FieldDefinition",
    "FieldKind",
    "OPTIONAL_FIELDS",
    "OUTCOME_HEADER",
    "OUTCOME_NOTES",
    "REQUIRED_FIELDS",
    "SECTIONS",
    "SURVEY_INTRO",
    "SURVEY_TITLE",
    "SectionDefinition",
    "TOTAL_SECTIONS",
    "empty_response",
    "get_field",
    "get_section",
    "section_of",
]
