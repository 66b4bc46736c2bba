"""Core domain models.

These dataclasses are shared across the core and adapters so neither side
depends on how the config is stored on disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional

DEFAULT_THEME = "system"
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class AppConfig:
    """Persisted application settings.

    Only ``theme`` and ``language`` carry meaning here; every other persisted
    key is kept in ``extras`` and written back untouched.
    """

    theme: str = DEFAULT_THEME
    language: str = DEFAULT_LANGUAGE
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Frozen view so shared snapshots cannot be edited behind the store.
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "AppConfig":
        extras = {key: value for key, value in raw.items() if key not in ("theme", "language")}
        return cls(
            theme=raw.get("theme", DEFAULT_THEME),
            language=raw.get("language", DEFAULT_LANGUAGE),
            extras=extras,
        )

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.extras)
        data["theme"] = self.theme
        data["language"] = self.language
        return data

    def with_theme(self, theme: str) -> "AppConfig":
        return replace(self, theme=theme)

    def with_language(self, language: str) -> "AppConfig":
        return replace(self, language=language)


@dataclass(frozen=True)
class StoreState:
    """Snapshot of the store handed to consumers."""

    config: Optional[AppConfig] = None
    loading: bool = False
    error: Optional[str] = None


@dataclass(frozen=True)
class NotifyResult:
    """Outcome of a best-effort host notification."""

    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None
