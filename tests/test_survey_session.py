from __future__ import annotations

import pytest

from core.errors import UnknownFieldError
from survey.schema import FIELD_IDS, empty_response
from survey.session import SurveySession


def test_new_session_exposes_initial_state(store) -> None:  # type: ignore[no-untyped-def]
    session = SurveySession(store.submit)

    assert set(session.response) == set(FIELD_IDS)
    assert session.current_section_index == 1
    assert session.progress == 0
    assert session.is_dirty is False
    assert session.field_valid("overallEnjoyment") is False
    assert session.field_valid("generalFeedback") is True


def test_set_field_recomputes_progress_and_validity(store) -> None:  # type: ignore[no-untyped-def]
    session = SurveySession(store.submit)

    session.set_field("overallEnjoyment", "4")

    assert session.field_value("overallEnjoyment") == "4"
    assert session.field_valid("overallEnjoyment") is True
    assert session.progress == 13
    assert session.is_dirty is True

    session.set_field("overallEnjoyment", None)

    assert session.field_value("overallEnjoyment") == ""
    assert session.field_valid("overallEnjoyment") is False
    assert session.progress == 0
    assert session.is_dirty is False


def test_optional_answers_mark_dirty_without_progress(store) -> None:  # type: ignore[no-untyped-def]
    session = SurveySession(store.submit)

    session.set_field("issuesComment", "Parking was hard to find")

    assert session.is_dirty is True
    assert session.progress == 0


def test_unknown_field_ids_are_rejected(store) -> None:  # type: ignore[no-untyped-def]
    session = SurveySession(store.submit)

    with pytest.raises(UnknownFieldError):
        session.set_field("shoeSize", "42")
    with pytest.raises(UnknownFieldError):
        session.field_value("shoeSize")
    assert set(session.response) == set(FIELD_IDS)


def test_response_view_is_a_copy(store) -> None:  # type: ignore[no-untyped-def]
    session = SurveySession(store.submit)
    view = session.response

    view["overallEnjoyment"] = "5"  # type: ignore[index]

    assert session.field_value("overallEnjoyment") == ""


def test_navigation_is_not_gated_by_validity(store) -> None:  # type: ignore[no-untyped-def]
    session = SurveySession(store.submit)

    assert session.advance() == 2
    assert session.advance() == 3
    assert session.advance() == 3
    assert session.retreat() == 2


def test_reset_restores_every_component(store, complete_answers) -> None:  # type: ignore[no-untyped-def]
    session = SurveySession(store.submit)
    for field_id, value in complete_answers.items():
        session.set_field(field_id, value)
    session.advance()
    session.submit_attempted = True

    session.reset()

    assert dict(session.response) == empty_response()
    assert session.current_section_index == 1
    assert session.progress == 0
    assert session.submit_attempted is False
    assert session.visible_errors() == {}
