"""Local SQLite response store."""

from __future__ import annotations

import asyncio
import logging
import os
import sqlite3
from typing import Any, Mapping

from core.errors import SubmissionError
from survey.schema import FIELD_IDS

logger = logging.getLogger(__name__)

_COLUMNS: tuple[str, ...] = (*FIELD_IDS, "submitted_at")


class SQLiteSurveyStore:
    """Persist each submission as one row of ``survey_responses``.

    Rows get an autoincrement id; the 13 answer columns and the
    ``submitted_at`` column are plain text.
    """

    def __init__(self, db_path: str, *, table: str = "survey_responses") -> None:
        if not table.isidentifier():
            raise ValueError(f"Invalid table name: {table!r}")
        self.db_path = db_path
        self.table = table
        self._initialized = False

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def init(self) -> None:
        """Create the database file and table when missing."""

        if self._initialized:
            return
        folder = os.path.dirname(self.db_path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        columns = ",\n".join(f'    "{column}" TEXT NOT NULL DEFAULT \'\'' for column in _COLUMNS)
        conn = self._connect()
        try:
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {self.table} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                {columns}
                );
                """
            )
            conn.execute(
                f"CREATE INDEX IF NOT EXISTS idx_{self.table}_submitted_at ON {self.table}(submitted_at);"
            )
            conn.commit()
        finally:
            conn.close()
        self._initialized = True

    def insert(self, record: Mapping[str, str]) -> int:
        """Insert ``record`` and return the assigned row id."""

        unknown = set(record) - set(_COLUMNS)
        if unknown:
            raise SubmissionError(f"unexpected columns {sorted(unknown)}")
        try:
            self.init()
            placeholders = ", ".join("?" for _ in _COLUMNS)
            quoted = ", ".join(f'"{column}"' for column in _COLUMNS)
            values = tuple(record.get(column) or "" for column in _COLUMNS)
            conn = self._connect()
            try:
                cur = conn.execute(
                    f"INSERT INTO {self.table} ({quoted}) VALUES ({placeholders});",
                    values,
                )
                conn.commit()
                row_id = int(cur.lastrowid or 0)
            finally:
                conn.close()
        except (sqlite3.Error, OSError) as exc:
            logger.error("Error submitting survey: %s", exc)
            raise SubmissionError(str(exc)) from exc
        logger.info("Stored survey response %s in %s", row_id, self.db_path)
        return row_id

    async def submit(self, record: Mapping[str, str]) -> int:
        return await asyncio.to_thread(self.insert, record)

    def fetch_all(self) -> list[dict[str, Any]]:
        """Return every stored row, oldest first."""

        self.init()
        conn = self._connect()
        try:
            conn.row_factory = sqlite3.Row
            rows = conn.execute(f"SELECT * FROM {self.table} ORDER BY id;").fetchall()
        finally:
            conn.close()
        return [dict(row) for row in rows]


__all__ = ["SQLiteSurveyStore"]
