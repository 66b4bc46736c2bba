"""Observable config store.

The store is the single writer of the in-memory config. Consumers read
``StoreState`` snapshots and subscribe to changes; every mutation goes through
``load_config``/``save_config`` or the field updaters built on top of them.

Overlapping calls are not serialized: the state reflects whichever operation
finishes last, not whichever was invoked last.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Optional

from configstore.core.models import AppConfig, NotifyResult, StoreState
from configstore.core.ports import HostNotifierPort, PersistencePort

LOGGER = logging.getLogger(__name__)

Listener = Callable[[StoreState], None]


class ConfigStore:
    """Holds ``{config, loading, error}`` and the operations that change it."""

    def __init__(
        self,
        persistence: PersistencePort,
        host_notifier: Optional[HostNotifierPort] = None,
    ) -> None:
        self._persistence = persistence
        self._host_notifier = host_notifier
        self._state = StoreState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def config(self) -> Optional[AppConfig]:
        return self._state.config

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def persistence(self) -> PersistencePort:
        return self._persistence

    @property
    def host_notifier(self) -> Optional[HostNotifierPort]:
        return self._host_notifier

    def attach_host_notifier(self, notifier: Optional[HostNotifierPort]) -> None:
        """Install (or remove, with ``None``) the host notifier."""

        self._host_notifier = notifier

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every new state; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        # A broken consumer must not leave the store mid-transition.
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                LOGGER.exception("Config listener failed")

    async def load_config(self) -> None:
        """Load the persisted config; failures only land in ``error``."""

        self._set(loading=True, error=None)
        try:
            config = await self._persistence.load()
        except Exception as exc:
            LOGGER.warning("Config load failed: %s", exc)
            self._set(error=str(exc), loading=False)
            return
        self._set(config=config, loading=False)
        LOGGER.info("Config loaded (theme=%s, language=%s)", config.theme, config.language)

    async def save_config(self, config: AppConfig, silent: bool = False) -> None:
        """Persist ``config`` and adopt it as the current state.

        A silent save leaves ``loading`` alone so rapid background writes do
        not flicker a loading indicator. Persistence failures are recorded in
        ``error`` and re-raised.
        """

        if not silent:
            self._set(loading=True, error=None)
        try:
            await self._persistence.save(config)
        except Exception as exc:
            LOGGER.warning("Config save failed: %s", exc)
            if silent:
                self._set(error=str(exc))
            else:
                self._set(error=str(exc), loading=False)
            raise

        if silent:
            self._set(config=config)
        else:
            self._set(config=config, loading=False)

        # Deliberately ignored: a host that cannot follow the theme must not
        # fail a save that already succeeded.
        result = await self._notify_host(config.theme)
        if not result.ok:
            LOGGER.debug("Host theme sync failed: %s", result.error)

    async def update_theme(self, theme: str) -> None:
        config = self._state.config
        if config is None or config.theme == theme:
            return
        await self.save_config(config.with_theme(theme), silent=True)

    async def update_language(self, language: str) -> None:
        config = self._state.config
        if config is None or config.language == language:
            return
        await self.save_config(config.with_language(language), silent=True)

    async def _notify_host(self, theme: str) -> NotifyResult:
        notifier = self._host_notifier
        if notifier is None:
            return NotifyResult()
        try:
            if not notifier.is_host_environment():
                return NotifyResult()
            await notifier.notify_theme_changed(theme)
        except Exception as exc:
            return NotifyResult(error=exc)
        return NotifyResult()
