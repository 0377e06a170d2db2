# app.py: US Kids Local Tour feedback survey (Streamlit entrypoint)
from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

from state import ensure_state  # noqa: E402
from survey.layout import render_survey  # noqa: E402
from survey.notifications import flush_notifications  # noqa: E402
from survey.schema import SURVEY_TITLE  # noqa: E402

APP_VERSION = "1.0.0"

st.set_page_config(
    page_title=SURVEY_TITLE,
    page_icon="⛳",
    layout="centered",
)

session = ensure_state()
st.session_state.setdefault("app_version", APP_VERSION)

flush_notifications()
render_survey(session)
