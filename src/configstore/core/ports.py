"""Ports (interfaces) used by the config store.

Ports define the minimal contracts for persistence and host notification
adapters so the store can be reused with different backends.
"""

from __future__ import annotations

from typing import Protocol

from configstore.core.models import AppConfig


class PersistencePort(Protocol):
    """Durable read/write of the application config."""

    async def load(self) -> AppConfig:
        ...

    async def save(self, config: AppConfig) -> None:
        ...


class HostNotifierPort(Protocol):
    """Best-effort theme sync with the environment hosting the app."""

    def is_host_environment(self) -> bool:
        ...

    async def notify_theme_changed(self, theme: str) -> None:
        ...
