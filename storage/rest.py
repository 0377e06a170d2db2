"""Supabase (PostgREST) backed response store."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Callable, Mapping

import requests
from requests import Response

from core.errors import SubmissionError

logger = logging.getLogger(__name__)


def build_insert_url(base_url: str, table: str) -> str:
    """Return the PostgREST endpoint inserting rows into ``table``."""

    return f"{base_url.rstrip('/')}/rest/v1/{table}"


def _error_detail(response: Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, Mapping):
        message = payload.get("message") or payload.get("error_description") or payload.get("error")
        if isinstance(message, str) and message:
            return message
    text = (response.text or "").strip()
    return text or f"HTTP {response.status_code}"


class RestSurveyStore:
    """Insert one survey row per submission through the Supabase REST API.

    The row identity is assigned by the server. Missing credentials do not
    prevent construction (the settings loader warns about them at startup);
    every submission then fails with :class:`SubmissionError`.
    """

    def __init__(
        self,
        *,
        url: str,
        api_key: str,
        table: str = "survey_responses",
        timeout: float = 10.0,
        request_func: Callable[..., Response] | None = None,
    ) -> None:
        self.url = url.strip()
        self.api_key = api_key.strip()
        self.table = table
        self.timeout = timeout
        self._request = request_func or requests.post

    @property
    def configured(self) -> bool:
        return bool(self.url and self.api_key)

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=minimal",
        }

    def insert(self, record: Mapping[str, str]) -> None:
        """Insert ``record`` synchronously.

        Raises:
            SubmissionError: On missing credentials, transport errors or an
                HTTP error status.
        """

        if not self.configured:
            raise SubmissionError("store credentials are not configured")
        body = json.dumps([dict(record)], ensure_ascii=False)
        try:
            response = self._request(
                build_insert_url(self.url, self.table),
                data=body.encode("utf-8"),
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Error submitting survey: %s", exc)
            raise SubmissionError(str(exc)) from exc
        if response.status_code >= 400:
            detail = _error_detail(response)
            logger.error("Error submitting survey (%s): %s", response.status_code, detail)
            raise SubmissionError(detail)

    async def submit(self, record: Mapping[str, str]) -> None:
        await asyncio.to_thread(self.insert, record)


__all__ = ["RestSurveyStore", "build_insert_url"]
