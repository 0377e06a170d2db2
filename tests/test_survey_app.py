from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from constants.keys import StateKeys, UIKeys
from storage.sqlite import SQLiteSurveyStore
from survey.submission import SUCCESS_TITLE
from survey.validation import REQUIRED_FIELD_MESSAGE

APP_FILE = Path(__file__).resolve().parents[1] / "app.py"

pytestmark = pytest.mark.apptest

SECTION_ANSWERS: tuple[dict[str, str], ...] = (
    {"overallEnjoyment": "5", "organizationQuality": "4", "supportSatisfaction": "5"},
    {"scheduleTimeliness": "yes", "communication": "4", "troubleshooting": "3"},
    {"venueSetup": "5", "backupStrategies": "4"},
)


@pytest.fixture
def db_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "survey.sqlite"
    monkeypatch.setenv("SURVEY_STORE", "sqlite")
    monkeypatch.setenv("SURVEY_SQLITE_PATH", str(path))
    return path


def _start() -> AppTest:
    app = AppTest.from_file(str(APP_FILE))
    app.run(timeout=30)
    assert not app.exception
    return app


def _answer(app: AppTest, answers: dict[str, str]) -> None:
    for field_id, value in answers.items():
        app.radio(key=UIKeys.field(field_id)).set_value(value)
    app.run(timeout=30)


def _next(app: AppTest) -> None:
    app.button(key=UIKeys.NEXT_BUTTON).click()
    app.run(timeout=30)


def test_completed_survey_is_stored_and_form_resets(db_path: Path) -> None:
    app = _start()
    assert app.button(key=UIKeys.NEXT_BUTTON).label == "Next"

    for answers in SECTION_ANSWERS[:-1]:
        _answer(app, answers)
        _next(app)
    _answer(app, SECTION_ANSWERS[-1])

    session = app.session_state[StateKeys.SESSION]
    assert session.progress == 100
    assert any("<span>100%</span>" in md.value for md in app.markdown)
    submit = app.button(key=UIKeys.SUBMIT_BUTTON)
    assert submit.disabled is False

    submit.click()
    app.run(timeout=30)

    assert not app.exception
    assert session.progress == 0
    assert session.current_section_index == 1
    assert app.radio(key=UIKeys.field("overallEnjoyment")).value is None
    assert len(app.toast) == 1
    assert SUCCESS_TITLE in app.toast[0].value
    rows = SQLiteSurveyStore(str(db_path)).fetch_all()
    assert len(rows) == 1
    assert rows[0]["scheduleTimeliness"] == "yes"
    assert rows[0]["backupStrategies"] == "4"


def test_submit_disabled_until_an_answer_is_given(db_path: Path) -> None:
    app = _start()
    _next(app)
    _next(app)

    assert app.button(key=UIKeys.SUBMIT_BUTTON).disabled is True


def test_incomplete_submit_shows_inline_errors_and_warning(db_path: Path) -> None:
    app = _start()
    _answer(app, SECTION_ANSWERS[0])
    _next(app)
    _next(app)

    app.button(key=UIKeys.SUBMIT_BUTTON).click()
    app.run(timeout=30)

    assert not app.exception
    markdown = [md.value for md in app.markdown]
    assert sum(REQUIRED_FIELD_MESSAGE in value for value in markdown) == 2
    assert len(app.warning) == 1
    assert "2. Logistical Efficiency" in app.warning[0].value
    assert len(app.toast) == 0
    assert app.session_state[StateKeys.SESSION].field_value("overallEnjoyment") == "5"
    assert not db_path.exists() or SQLiteSurveyStore(str(db_path)).fetch_all() == []
