from __future__ import annotations

import pytest

from core.errors import UnknownFieldError
from survey.schema import OPTIONAL_FIELDS, REQUIRED_FIELDS, empty_response
from survey.validation import (
    REQUIRED_FIELD_MESSAGE,
    field_errors,
    is_field_valid,
    is_response_submittable,
    missing_required_fields,
    sections_with_missing_fields,
)


def test_optional_fields_are_always_valid() -> None:
    for field_id in OPTIONAL_FIELDS:
        assert is_field_valid(field_id, "") is True
        assert is_field_valid(field_id, None) is True


def test_required_fields_need_a_non_empty_value() -> None:
    assert is_field_valid("overallEnjoyment", "") is False
    assert is_field_valid("overallEnjoyment", None) is False
    assert is_field_valid("overallEnjoyment", "3") is True
    # Whitespace is not trimmed.
    assert is_field_valid("overallEnjoyment", " ") is True


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(UnknownFieldError):
        is_field_valid("notAField", "1")


def test_complete_response_is_submittable_regardless_of_optional_fields(
    complete_answers: dict[str, str],
) -> None:
    response = {**empty_response(), **complete_answers}
    assert is_response_submittable(response) is True

    response["generalFeedback"] = "Great event"
    response["delaysComment"] = None  # type: ignore[assignment]
    assert is_response_submittable(response) is True


@pytest.mark.parametrize("missing", REQUIRED_FIELDS)
def test_any_missing_required_field_blocks_submission(
    complete_answers: dict[str, str], missing: str
) -> None:
    response = {**empty_response(), **complete_answers, missing: ""}

    assert is_response_submittable(response) is False
    assert missing_required_fields(response) == [missing]
    assert field_errors(response) == {missing: REQUIRED_FIELD_MESSAGE}


def test_absent_keys_count_as_missing(complete_answers: dict[str, str]) -> None:
    response = dict(complete_answers)
    del response["venueSetup"]

    assert is_response_submittable(response) is False
    assert sections_with_missing_fields(response) == [3]


def test_sections_with_missing_fields_on_blank_response() -> None:
    assert sections_with_missing_fields(empty_response()) == [1, 2, 3]
    assert field_errors(empty_response()).keys() == set(REQUIRED_FIELDS)
