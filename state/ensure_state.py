"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable

import streamlit as st

from config import Settings, load_settings
from constants.keys import StateKeys, UIKeys
from storage import build_store
from survey.notifications import notify
from survey.schema import FIELD_IDS
from survey.session import SurveySession
from utils.logging_context import configure_logging, set_session_id

logger = logging.getLogger(__name__)


_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.SESSION_ID: lambda: uuid.uuid4().hex[:12],
        StateKeys.NOTIFICATIONS: list,
    }
)


def _build_session(settings: Settings) -> SurveySession:
    store = build_store(settings)
    return SurveySession(store.submit, notify=notify)


def ensure_state(settings: Settings | None = None) -> SurveySession:
    """Initialize ``st.session_state`` and return the participant's session.

    Existing keys are preserved so reruns keep the answers.
    """

    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory()

    resolved = st.session_state.get(StateKeys.SETTINGS)
    if not isinstance(resolved, Settings):
        resolved = settings or load_settings()
        st.session_state[StateKeys.SETTINGS] = resolved
        configure_logging(level=resolved.log_level)

    set_session_id(str(st.session_state[StateKeys.SESSION_ID]))

    session = st.session_state.get(StateKeys.SESSION)
    if not isinstance(session, SurveySession):
        session = _build_session(resolved)
        st.session_state[StateKeys.SESSION] = session
        logger.info("Started survey session.")
    return session


def clear_field_widgets() -> None:
    """Drop widget values so inputs re-render blank after a reset."""

    for field_id in FIELD_IDS:
        st.session_state.pop(UIKeys.field(field_id), None)


__all__ = ["clear_field_widgets", "ensure_state"]
