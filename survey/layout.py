"""Streamlit rendering for the feedback survey pages."""

from __future__ import annotations

import asyncio
import html
import logging
from typing import Callable

import streamlit as st

from constants.keys import UIKeys
from state.ensure_state import clear_field_widgets
from survey.schema import (
    FREE_TEXT_PLACEHOLDER,
    OUTCOME_HEADER,
    OUTCOME_NOTES,
    SURVEY_INTRO,
    SURVEY_TITLE,
    FieldDefinition,
    get_section,
)
from survey.session import SurveySession
from survey.submission import SubmissionStatus
from utils.logging_context import log_context

logger = logging.getLogger(__name__)


_SURVEY_STYLE = """
<style>
.survey-hero {
    text-align: center;
    padding: 2rem 1rem;
    border-radius: 1rem;
    margin-bottom: 1.5rem;
    color: #fff;
    background: linear-gradient(to right, #2563eb, #4f46e5);
}

.survey-hero h1 {
    color: #fff;
    font-size: 2.2rem;
    margin-bottom: 0.75rem;
}

.survey-hero p {
    color: #dbeafe;
    max-width: 42rem;
    margin: 0 auto;
}

.survey-progress-label {
    display: flex;
    justify-content: space-between;
    font-weight: 600;
    color: #1d4ed8;
}

.survey-field-error {
    color: #dc2626;
    font-size: 0.9rem;
    margin-top: -0.5rem;
}
</style>
"""


def inject_survey_style() -> None:
    st.markdown(_SURVEY_STYLE, unsafe_allow_html=True)


def render_header() -> None:
    st.markdown(
        f"<div class='survey-hero'><h1>{html.escape(SURVEY_TITLE)}</h1>"
        f"<p>{html.escape(SURVEY_INTRO)}</p></div>",
        unsafe_allow_html=True,
    )


def render_progress(session: SurveySession) -> None:
    progress = session.progress
    st.markdown(
        f"<div class='survey-progress-label'><span>Your Progress</span><span>{progress}%</span></div>",
        unsafe_allow_html=True,
    )
    st.progress(progress)


def _on_field_change(session: SurveySession, field_id: str) -> Callable[[], None]:
    def _apply() -> None:
        session.set_field(field_id, st.session_state.get(UIKeys.field(field_id)))

    return _apply


def _render_field(session: SurveySession, field: FieldDefinition, error: str | None) -> None:
    widget_key = UIKeys.field(field.id)
    current = session.field_value(field.id)
    if field.kind == "single-choice":
        values = list(field.option_values)
        st.radio(
            field.label,
            options=values,
            format_func=field.option_label,
            index=values.index(current) if current in values else None,
            key=widget_key,
            on_change=_on_field_change(session, field.id),
        )
    else:
        st.text_area(
            field.label,
            value=current,
            key=widget_key,
            placeholder=FREE_TEXT_PLACEHOLDER,
            height=120,
            on_change=_on_field_change(session, field.id),
        )
    if error:
        st.markdown(f"<p class='survey-field-error'>{html.escape(error)}</p>", unsafe_allow_html=True)


def render_section(session: SurveySession) -> None:
    """Render the questions of the active section."""

    index = session.current_section_index
    section = get_section(index)
    errors = session.visible_errors()
    with log_context(survey_section=index), st.container(border=True):
        logger.debug("Rendering section %s with %d inline errors.", index, len(errors))
        st.subheader(section.title)
        for field in section.fields:
            _render_field(session, field, errors.get(field.id))


def _submit(session: SurveySession) -> None:
    with log_context(survey_section=session.current_section_index):
        asyncio.run(session.request_submit())
    outcome = session.controller.last_outcome
    if outcome is not None and outcome.status is SubmissionStatus.SUCCEEDED:
        logger.debug("Clearing survey widgets after a stored submission.")
        clear_field_widgets()


def render_navigation(session: SurveySession) -> None:
    """Render the Previous / Next / Submit controls."""

    navigation = session.navigation
    submitting = session.submission_state.status is SubmissionStatus.SUBMITTING
    left, _, right = st.columns([1, 2, 1])
    if not navigation.is_first:
        left.button(
            "Previous",
            key=UIKeys.PREVIOUS_BUTTON,
            on_click=session.retreat,
            use_container_width=True,
        )
    if not navigation.is_last:
        right.button(
            "Next",
            key=UIKeys.NEXT_BUTTON,
            type="primary",
            on_click=session.advance,
            use_container_width=True,
        )
    else:
        right.button(
            "Submitting..." if submitting else "Submit",
            key=UIKeys.SUBMIT_BUTTON,
            type="primary",
            disabled=submitting or not session.is_dirty,
            on_click=_submit,
            args=(session,),
            use_container_width=True,
        )


def render_validation_warnings(session: SurveySession) -> None:
    """Point at earlier sections that still miss answers after a submit attempt."""

    if not session.submit_attempted:
        return
    incomplete = [index for index in session.incomplete_sections() if index != session.current_section_index]
    if not incomplete:
        return
    titles = ", ".join(f"{index}. {get_section(index).title}" for index in incomplete)
    st.warning(f"Please answer the remaining required questions in: {titles}")


def render_outcome_notes() -> None:
    with st.container(border=True):
        st.markdown(f"### {OUTCOME_HEADER}")
        for heading, text in OUTCOME_NOTES:
            st.markdown(f"- **{heading}:** {text}")


def render_survey(session: SurveySession) -> None:
    """Render the full survey page for ``session``."""

    inject_survey_style()
    render_header()
    render_progress(session)
    render_section(session)
    render_validation_warnings(session)
    render_navigation(session)
    render_outcome_notes()


__all__ = [
    "inject_survey_style",
    "render_header",
    "render_navigation",
    "render_outcome_notes",
    "render_progress",
    "render_section",
    "render_survey",
    "render_validation_warnings",
]
