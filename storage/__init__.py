"""Response store backends and the factory selecting one from settings."""

from __future__ import annotations

from typing import Mapping, Protocol

from config import Settings, StoreBackend

from .rest import RestSurveyStore
from .sqlite import SQLiteSurveyStore


class SurveyStore(Protocol):
    """Asynchronous submit capability consumed by the survey session."""

    async def submit(self, record: Mapping[str, str]) -> object: ...


def build_store(settings: Settings) -> SurveyStore:
    """Return the store configured by ``settings``."""

    if settings.store_backend is StoreBackend.SQLITE:
        return SQLiteSurveyStore(settings.sqlite_path, table=settings.table)
    return RestSurveyStore(
        url=settings.supabase_url,
        api_key=settings.supabase_anon_key,
        table=settings.table,
        timeout=settings.request_timeout,
    )


__all__ = ["RestSurveyStore", "SQLiteSurveyStore", "SurveyStore", "build_store"]
