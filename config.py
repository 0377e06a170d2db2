"""Configuration loader for the survey response store and logging.

Values are read from Streamlit secrets first, then environment variables
(``.env`` files are loaded when ``python-dotenv`` is installed). Missing
store credentials never raise: the app still renders and submissions fail
with a user-facing notification.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Mapping, Optional

import streamlit as st

try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


logger = logging.getLogger(__name__)

_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "on")

DEFAULT_TABLE = "survey_responses"
DEFAULT_SQLITE_PATH = "./data/survey/survey.sqlite"
DEFAULT_REQUEST_TIMEOUT = 10.0


class StoreBackend(StrEnum):
    """Enumerate the supported response store backends."""

    REST = "rest"
    SQLITE = "sqlite"


@dataclass(slots=True)
class Settings:
    """Runtime configuration values.

    Attributes:
        store_backend: Which response store receives submissions.
        supabase_url: Base URL of the Supabase project.
        supabase_anon_key: Public anon key used for inserts.
        table: Table receiving one row per submission.
        sqlite_path: Database file for the ``sqlite`` backend.
        request_timeout: HTTP timeout in seconds for the ``rest`` backend.
        debug_logs: Toggle verbose debug logging.
    """

    store_backend: StoreBackend = StoreBackend.REST
    supabase_url: str = ""
    supabase_anon_key: str = ""
    table: str = DEFAULT_TABLE
    sqlite_path: str = DEFAULT_SQLITE_PATH
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    debug_logs: bool = False

    @property
    def has_store_credentials(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug_logs else logging.INFO


def _as_bool(value: Optional[str]) -> bool:
    """Interpret truthy string values as boolean True."""

    if value is None:
        return False
    return value.strip().lower() in _TRUTHY_ENV_VALUES


def _coerce_secret_value(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _read_secrets() -> Mapping[str, Any]:
    try:
        return dict(st.secrets)
    except Exception:  # pragma: no cover - no secrets.toml outside Streamlit
        return {}


def _parse_backend(value: str | None) -> StoreBackend:
    if not value:
        return StoreBackend.REST
    try:
        return StoreBackend(value.strip().lower())
    except ValueError:
        logger.warning("Unknown SURVEY_STORE %r; falling back to %s.", value, StoreBackend.REST.value)
        return StoreBackend.REST


def _parse_timeout(value: str | None) -> float:
    if not value:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        parsed = float(value)
    except ValueError:
        logger.warning("SURVEY_REQUEST_TIMEOUT %r is not a number; using %s.", value, DEFAULT_REQUEST_TIMEOUT)
        return DEFAULT_REQUEST_TIMEOUT
    if parsed <= 0:
        return DEFAULT_REQUEST_TIMEOUT
    return parsed


def load_settings(secrets: Mapping[str, Any] | None = None) -> Settings:
    """Load settings from Streamlit secrets or environment variables.

    A ``supabase`` section in the secrets is honoured for the store
    credentials. Missing credentials for the ``rest`` backend are logged as
    a warning.
    """

    resolved_secrets = _read_secrets() if secrets is None else secrets
    supabase_section = resolved_secrets.get("supabase")
    section: Mapping[str, Any] = supabase_section if isinstance(supabase_section, Mapping) else {}

    def _get(key: str) -> str:
        direct = _coerce_secret_value(resolved_secrets.get(key))
        if direct:
            return direct
        nested = _coerce_secret_value(section.get(key))
        if nested:
            return nested
        return _coerce_secret_value(os.getenv(key))

    settings = Settings(
        store_backend=_parse_backend(_get("SURVEY_STORE")),
        supabase_url=_get("SUPABASE_URL"),
        supabase_anon_key=_get("SUPABASE_ANON_KEY"),
        table=_get("SURVEY_TABLE") or DEFAULT_TABLE,
        sqlite_path=_get("SURVEY_SQLITE_PATH") or DEFAULT_SQLITE_PATH,
        request_timeout=_parse_timeout(_get("SURVEY_REQUEST_TIMEOUT")),
        debug_logs=_as_bool(_get("DEBUG_LOGS")),
    )
    if settings.store_backend is StoreBackend.REST and not settings.has_store_credentials:
        logger.warning(
            "Missing Supabase credentials. Using development fallbacks or the app might not work correctly."
        )
    return settings


__all__ = ["Settings", "StoreBackend", "load_settings"]
