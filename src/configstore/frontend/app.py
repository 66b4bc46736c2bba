"""Main Textual app for the configstore config panel."""

from __future__ import annotations

import logging
from typing import Any, Optional

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Footer, Select, Static

from configstore.adapters.textual_notifier import TextualThemeNotifier
from configstore.core.models import StoreState
from configstore.core.store import ConfigStore

from .constants import ACCENT_BLUE, LANGUAGE_OPTIONS, THEME_OPTIONS

LOGGER = logging.getLogger(__name__)


class ConfigPanelApp(App):
    """Config panel rendering a ConfigStore and editing theme and language."""

    CSS = """
    Screen {
        background: #0f1a21;
        color: #e8eef5;
    }

    #header {
        height: 6;
        padding: 1 4;
        border-bottom: solid #2a3a46;
    }

    #title {
        text-style: bold;
    }

    .subtle {
        color: #c6d2dd;
    }

    #form {
        padding: 1 4;
    }

    .form-label {
        margin-top: 1;
    }

    .status-loaded {
        color: #6fcf97;
    }

    .status-loading {
        color: #f2c94c;
    }

    .status-error {
        color: #eb5757;
    }
    """

    BINDINGS = [
        ("ctrl+r", "reload_config", "Reload"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, store: ConfigStore, host_theme_sync: bool = False, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._store = store
        self._host_theme_sync = host_theme_sync
        self._unsubscribe = None
        self.status_text = ""

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal():
                with Vertical():
                    yield Static(self._title_text(), id="title")
                    yield Static("theme + language", classes="subtle")
                with Vertical():
                    yield Static("", id="header-status")
        with Vertical(id="form"):
            yield Static("theme", classes="form-label")
            yield Select(THEME_OPTIONS, id="theme-select", allow_blank=True)
            yield Static("language", classes="form-label")
            yield Select(LANGUAGE_OPTIONS, id="language-select", allow_blank=True)
        yield Footer()

    async def on_mount(self) -> None:
        if self._host_theme_sync:
            self._store.attach_host_notifier(TextualThemeNotifier(self))
        self._unsubscribe = self._store.subscribe(self._render_state)
        self._render_state(self._store.state)
        await self._store.load_config()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def action_reload_config(self) -> None:
        await self._store.load_config()

    @on(Select.Changed, "#theme-select")
    async def _theme_changed(self, event: Select.Changed) -> None:
        if event.value is Select.BLANK:
            return
        await self._apply(self._store.update_theme, str(event.value))

    @on(Select.Changed, "#language-select")
    async def _language_changed(self, event: Select.Changed) -> None:
        if event.value is Select.BLANK:
            return
        await self._apply(self._store.update_language, str(event.value))

    async def _apply(self, updater, value: str) -> None:
        try:
            await updater(value)
        except Exception as exc:
            # The store already holds the error; surface it as a toast too.
            LOGGER.warning("Config update failed: %s", exc)
            self.notify(str(exc), title="Save failed", severity="error")

    def _render_state(self, state: StoreState) -> None:
        status = self.query_one("#header-status", Static)
        status.remove_class("status-loaded", "status-loading", "status-error")
        if state.loading:
            self.status_text = "config: loading"
            status.add_class("status-loading")
        elif state.error:
            self.status_text = f"config: error ({state.error})"
            status.add_class("status-error")
        elif state.config is None:
            self.status_text = "config: not loaded"
        else:
            self.status_text = "config: loaded"
            status.add_class("status-loaded")
        status.update(self.status_text)

        if state.config is not None:
            self._sync_select("#theme-select", THEME_OPTIONS, state.config.theme)
            self._sync_select("#language-select", LANGUAGE_OPTIONS, state.config.language)

    def _sync_select(self, selector: str, options: list[tuple[str, str]], value: Optional[str]) -> None:
        select = self.query_one(selector, Select)
        # Values written by other tools may not be offered here; leave the widget as is.
        if value in {option for _, option in options} and select.value != value:
            # Mirroring the store is not a user edit; keep it from re-entering the updaters.
            with select.prevent(Select.Changed):
                select.value = value

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("CONFIG", ACCENT_BLUE),
            ("STORE > Config Panel", "bold"),
        )
