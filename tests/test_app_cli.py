from __future__ import annotations

import json

import pytest

from configstore import app, settings
from configstore.adapters.command_notifier import CommandThemeNotifier
from configstore.adapters.sqlite_persistence import SQLitePersistence
from configstore.core.store import ConfigStore


@pytest.fixture
def json_env(monkeypatch, tmp_path):
    path = tmp_path / "config.json"
    monkeypatch.setattr(settings, "load_dotenv", lambda: False)
    monkeypatch.setattr(app, "_configure_logging", lambda config: None)
    for name in ("CONFIGSTORE_BACKEND", "CONFIGSTORE_HOST", "CONFIGSTORE_THEME_COMMAND"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CONFIGSTORE_PATH", str(path))
    return path


def test_build_store_selects_sqlite_backend(tmp_path) -> None:
    runtime = settings.load_settings(
        {"CONFIGSTORE_BACKEND": "sqlite", "CONFIGSTORE_DB_PATH": str(tmp_path / "c.db")}
    )

    store = app.build_store(runtime)

    assert isinstance(store, ConfigStore)
    assert isinstance(store.persistence, SQLitePersistence)
    assert store.host_notifier is None


def test_build_store_wires_command_host() -> None:
    runtime = settings.load_settings(
        {"CONFIGSTORE_HOST": "command", "CONFIGSTORE_THEME_COMMAND": "notify {theme}"}
    )

    store = app.build_store(runtime)

    assert isinstance(store.host_notifier, CommandThemeNotifier)


def test_show_prints_config(json_env, capsys) -> None:
    json_env.write_text(json.dumps({"theme": "dark", "language": "en", "auto_launch": True}))

    assert app.main(["show"]) == 0

    printed = json.loads(capsys.readouterr().out)
    assert printed == {"theme": "dark", "language": "en", "auto_launch": True}


def test_show_reports_load_error(json_env, capsys) -> None:
    json_env.write_text("[]")

    assert app.main(["show"]) == 1
    assert "config root must be an object" in capsys.readouterr().err


def test_set_theme_persists_and_keeps_other_fields(json_env, capsys) -> None:
    json_env.write_text(json.dumps({"theme": "dark", "language": "fr", "auto_launch": True}))

    assert app.main(["set-theme", "light"]) == 0

    assert json.loads(json_env.read_text()) == {
        "theme": "light",
        "language": "fr",
        "auto_launch": True,
    }
    assert "theme: light" in capsys.readouterr().out


def test_set_language_creates_file_from_defaults(json_env) -> None:
    assert app.main(["set-language", "de"]) == 0

    assert json.loads(json_env.read_text()) == {"theme": "system", "language": "de"}
