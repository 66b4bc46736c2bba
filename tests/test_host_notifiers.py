from __future__ import annotations

import asyncio
import sys

import pytest

from configstore.adapters.command_notifier import CommandThemeNotifier
from configstore.adapters.textual_notifier import TextualThemeNotifier
from configstore.core.errors import NotifyError


class FakeApp:
    def __init__(self, is_running: bool = True) -> None:
        self.is_running = is_running
        self.theme = "textual-dark"


def test_textual_notifier_switches_theme() -> None:
    app = FakeApp()
    notifier = TextualThemeNotifier(app)

    asyncio.run(notifier.notify_theme_changed("light"))

    assert notifier.is_host_environment() is True
    assert app.theme == "textual-light"


def test_textual_notifier_leaves_system_theme_alone() -> None:
    app = FakeApp()

    asyncio.run(TextualThemeNotifier(app).notify_theme_changed("system"))

    assert app.theme == "textual-dark"


def test_textual_notifier_rejects_unknown_theme() -> None:
    with pytest.raises(NotifyError):
        asyncio.run(TextualThemeNotifier(FakeApp()).notify_theme_changed("neon"))


def test_textual_notifier_not_host_when_app_stopped() -> None:
    assert TextualThemeNotifier(FakeApp(is_running=False)).is_host_environment() is False


def test_command_notifier_detects_host_from_environment() -> None:
    command = "set-theme {theme}"

    assert CommandThemeNotifier(command, environ={"CONFIGSTORE_HOST": "command"}).is_host_environment()
    assert not CommandThemeNotifier(command, environ={}).is_host_environment()
    assert not CommandThemeNotifier(" ", environ={"CONFIGSTORE_HOST": "command"}).is_host_environment()


def test_command_notifier_substitutes_theme() -> None:
    notifier = CommandThemeNotifier("gsettings set color-scheme 'prefer-{theme}'", environ={})

    assert notifier.build_args("dark") == ["gsettings", "set", "color-scheme", "prefer-dark"]


def test_command_notifier_runs_command() -> None:
    command = f'"{sys.executable}" -c "import sys; sys.exit(0 if sys.argv[1] == \'dark\' else 3)" {{theme}}'
    notifier = CommandThemeNotifier(command, environ={})

    asyncio.run(notifier.notify_theme_changed("dark"))
    with pytest.raises(NotifyError, match="exited 3"):
        asyncio.run(notifier.notify_theme_changed("light"))


def test_command_notifier_missing_binary_raises_notify_error() -> None:
    notifier = CommandThemeNotifier("definitely-not-a-real-binary-xyz {theme}", environ={})

    with pytest.raises(NotifyError):
        asyncio.run(notifier.notify_theme_changed("dark"))
