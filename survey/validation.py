"""Field and response validation for the feedback survey."""

from __future__ import annotations

from typing import Final, Mapping

from survey.schema import REQUIRED_FIELDS, SECTIONS, get_field

REQUIRED_FIELD_MESSAGE: Final[str] = "Please select an option"

Response = Mapping[str, "str | None"]


def has_answer(value: object | None) -> bool:
    """Return ``True`` when ``value`` is a non-empty string.

    ``None`` and ``""`` are equivalent. Whitespace is not trimmed, so a
    single space counts as an answer.
    """

    return isinstance(value, str) and value != ""


def is_field_valid(field_id: str, value: str | None) -> bool:
    """Return ``True`` if ``field_id`` is optional or holds an answer."""

    field = get_field(field_id)
    if not field.required:
        return True
    return has_answer(value)


def missing_required_fields(response: Response) -> list[str]:
    """Return the required field ids without an answer, in survey order."""

    return [field_id for field_id in REQUIRED_FIELDS if not has_answer(response.get(field_id))]


def is_response_submittable(response: Response) -> bool:
    """Return ``True`` iff every required field in ``response`` is valid."""

    return all(is_field_valid(field_id, response.get(field_id)) for field_id in REQUIRED_FIELDS)


def field_errors(response: Response) -> dict[str, str]:
    """Map each invalid required field to its inline error message."""

    return {field_id: REQUIRED_FIELD_MESSAGE for field_id in missing_required_fields(response)}


def sections_with_missing_fields(response: Response) -> list[int]:
    """Return 1-based indices of sections that still have unanswered required fields."""

    missing = set(missing_required_fields(response))
    return [
        index
        for index, section in enumerate(SECTIONS, start=1)
        if missing.intersection(section.required_field_ids)
    ]


__all__ = [
    "REQUIRED_FIELD_MESSAGE",
    "field_errors",
    "has_answer",
    "is_field_valid",
    "is_response_submittable",
    "missing_required_fields",
    "sections_with_missing_fields",
]
