"""Textual host notifier.

When the store runs inside the config panel, the panel itself is the host:
theme changes are mirrored onto the running Textual app.
"""

from __future__ import annotations

from textual.app import App

from configstore.core.errors import NotifyError

# "system" follows whatever the terminal already uses, so it maps to nothing.
TEXTUAL_THEMES = {
    "dark": "textual-dark",
    "light": "textual-light",
    "system": None,
}


class TextualThemeNotifier:
    """Host notifier adapter that switches a Textual app's theme."""

    def __init__(self, app: App) -> None:
        self._app = app

    def is_host_environment(self) -> bool:
        return self._app.is_running

    async def notify_theme_changed(self, theme: str) -> None:
        if theme not in TEXTUAL_THEMES:
            raise NotifyError(f"Unsupported theme for Textual host: {theme}")
        textual_theme = TEXTUAL_THEMES[theme]
        if textual_theme is None:
            return
        self._app.theme = textual_theme
