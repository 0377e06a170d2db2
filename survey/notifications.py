"""Streamlit notify capability backed by a session-state queue.

Notifications are queued rather than shown immediately: a successful
submission clears the form and triggers a rerun, and the toast has to
survive it.
"""

from __future__ import annotations

from typing import Any, MutableMapping

import streamlit as st

from constants.keys import StateKeys
from survey.submission import NotificationKind

_ICONS: dict[str, str] = {"success": "✅", "error": "⚠️"}


def _queue(session_state: MutableMapping[str, Any]) -> list[dict[str, str]]:
    queue = session_state.get(StateKeys.NOTIFICATIONS)
    if not isinstance(queue, list):
        queue = []
        session_state[StateKeys.NOTIFICATIONS] = queue
    return queue


def notify(kind: NotificationKind, title: str, message: str) -> None:
    """Queue a toast for the next render pass."""

    _queue(st.session_state).append({"kind": kind, "title": title, "message": message})


def flush_notifications() -> int:
    """Show and drop every queued toast; return how many were shown."""

    queue = _queue(st.session_state)
    shown = 0
    while queue:
        entry = queue.pop(0)
        icon = _ICONS.get(entry.get("kind", ""), None)
        st.toast(f"**{entry.get('title', '')}**  \n{entry.get('message', '')}", icon=icon)
        shown += 1
    return shown


__all__ = ["flush_notifications", "notify"]
