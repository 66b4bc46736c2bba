"""SQLite persistence adapter.

Implements the core PersistencePort using a key/value table, one row per
top-level config field with a JSON-encoded value.
"""

from __future__ import annotations

import asyncio
import json
import sqlite3

from configstore.core.errors import LoadError, SaveError
from configstore.core.models import AppConfig


class SQLitePersistence:
    """Thin SQLite wrapper that satisfies the PersistencePort contract."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        """Create the app_config table if it does not exist.

        Fields:
        - key: top-level config field name (PRIMARY KEY)
        - value: JSON-encoded field value
        """

        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS app_config (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )

    async def load(self) -> AppConfig:
        return await asyncio.to_thread(self._read)

    async def save(self, config: AppConfig) -> None:
        await asyncio.to_thread(self._write, config)

    def _read(self) -> AppConfig:
        try:
            self.init_db()
            with self._connect() as conn:
                rows = conn.execute("SELECT key, value FROM app_config").fetchall()
            raw = {row["key"]: json.loads(row["value"]) for row in rows}
        except (sqlite3.Error, json.JSONDecodeError) as exc:
            raise LoadError(f"load failed: {exc}") from exc
        # An empty table means nothing was saved yet.
        if not raw:
            return AppConfig()
        return AppConfig.from_dict(raw)

    def _write(self, config: AppConfig) -> None:
        try:
            rows = [(key, json.dumps(value)) for key, value in config.to_dict().items()]
            self.init_db()
            # The connection context manager commits both statements together
            # or rolls both back.
            with self._connect() as conn:
                conn.execute("DELETE FROM app_config")
                conn.executemany(
                    "INSERT INTO app_config (key, value) VALUES (?, ?)",
                    rows,
                )
        except (sqlite3.Error, TypeError, ValueError) as exc:
            raise SaveError(f"save failed: {exc}") from exc
