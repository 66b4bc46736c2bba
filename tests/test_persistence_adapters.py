from __future__ import annotations

import asyncio
import json
import sqlite3

import pytest

from configstore.adapters.json_file_persistence import JsonFilePersistence
from configstore.adapters.sqlite_persistence import SQLitePersistence
from configstore.core.errors import LoadError, SaveError
from configstore.core.models import AppConfig


def test_json_missing_file_loads_defaults(tmp_path) -> None:
    persistence = JsonFilePersistence(tmp_path / "config.json")

    assert asyncio.run(persistence.load()) == AppConfig()


def test_json_save_then_load_preserves_extras(tmp_path) -> None:
    path = tmp_path / "nested" / "config.json"
    persistence = JsonFilePersistence(path)
    config = AppConfig(theme="light", language="zh", extras={"proxy": {"port": 8045}})

    asyncio.run(persistence.save(config))

    assert json.loads(path.read_text(encoding="utf-8"))["proxy"] == {"port": 8045}
    assert asyncio.run(persistence.load()) == config
    assert not (tmp_path / "nested" / "config.json.tmp").exists()


def test_json_rejects_non_object_root(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(LoadError, match="config root must be an object"):
        asyncio.run(JsonFilePersistence(path).load())


def test_json_reports_decode_errors(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(LoadError, match="config.json error"):
        asyncio.run(JsonFilePersistence(path).load())


def test_json_save_into_unwritable_location_raises_save_error(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    persistence = JsonFilePersistence(blocker / "config.json")

    with pytest.raises(SaveError):
        asyncio.run(persistence.save(AppConfig()))


def test_sqlite_empty_table_loads_defaults(tmp_path) -> None:
    persistence = SQLitePersistence(str(tmp_path / "config.db"))
    persistence.init_db()

    assert asyncio.run(persistence.load()) == AppConfig()


def test_sqlite_save_replaces_previous_rows(tmp_path) -> None:
    db_path = str(tmp_path / "config.db")
    persistence = SQLitePersistence(db_path)
    persistence.init_db()

    asyncio.run(persistence.save(AppConfig(theme="dark", language="en", extras={"old": 1})))
    asyncio.run(persistence.save(AppConfig(theme="light", language="en", extras={"new": [1, 2]})))

    loaded = asyncio.run(persistence.load())
    assert loaded == AppConfig(theme="light", language="en", extras={"new": [1, 2]})
    with sqlite3.connect(db_path) as conn:
        keys = {row[0] for row in conn.execute("SELECT key FROM app_config")}
    assert keys == {"theme", "language", "new"}


def test_sqlite_corrupt_value_raises_load_error(tmp_path) -> None:
    db_path = str(tmp_path / "config.db")
    persistence = SQLitePersistence(db_path)
    persistence.init_db()
    with sqlite3.connect(db_path) as conn:
        conn.execute("INSERT INTO app_config (key, value) VALUES ('theme', '{broken')")

    with pytest.raises(LoadError):
        asyncio.run(persistence.load())
