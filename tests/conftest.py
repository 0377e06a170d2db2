from pathlib import Path
import sys
from dataclasses import dataclass

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from survey.schema import REQUIRED_FIELDS  # noqa: E402

_CONFIG_ENV_VARS: tuple[str, ...] = (
    "SURVEY_STORE",
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "SURVEY_TABLE",
    "SURVEY_SQLITE_PATH",
    "SURVEY_REQUEST_TIMEOUT",
    "DEBUG_LOGS",
)


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary.

    Tests marked ``apptest`` run the real script and keep Streamlit's state.
    """

    if request.node.get_closest_marker("apptest") is not None:
        yield
        return
    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``.env`` values out of configuration tests."""

    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def complete_answers() -> dict[str, str]:
    """Answers for every required field, using the first option of each question."""

    answers = {field_id: "5" for field_id in REQUIRED_FIELDS}
    answers["scheduleTimeliness"] = "yes"
    return answers


class RecordingStore:
    """In-memory submit capability that records every call."""

    def __init__(self, *, error: Exception | None = None) -> None:
        self.error = error
        self.records: list[dict[str, str]] = []

    async def submit(self, record):  # type: ignore[no-untyped-def]
        self.records.append(dict(record))
        if self.error is not None:
            raise self.error
        return None


class RecordingNotifier:
    """Notify capability capturing ``(kind, title, message)`` tuples."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str]] = []

    def __call__(self, kind: str, title: str, message: str) -> None:
        self.calls.append((kind, title, message))


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def failing_store() -> RecordingStore:
    return RecordingStore(error=RuntimeError("Failed to submit survey: connection refused"))
