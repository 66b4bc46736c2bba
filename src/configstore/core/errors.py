"""Error types raised across the core/adapter boundary."""

from __future__ import annotations


class ConfigStoreError(RuntimeError):
    """Base class for configstore failures."""


class LoadError(ConfigStoreError):
    """Reading the persisted config failed."""


class SaveError(ConfigStoreError):
    """Writing the config failed."""


class NotifyError(ConfigStoreError):
    """The host environment rejected a theme notification."""
