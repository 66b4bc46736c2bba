"""Core configuration dataclasses.

Environment parsing lives in ``configstore.settings``; these dataclasses
define the shape the wiring code expects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PersistenceConfig:
    """Which persistence adapter to build and where it keeps its data."""

    backend: str
    config_path: str
    db_path: str


@dataclass(frozen=True)
class HostConfig:
    """Host environment the store reports theme changes to."""

    name: Optional[str]
    theme_command: Optional[str]


@dataclass(frozen=True)
class LoggingConfig:
    level: str
    file_path: Optional[str]
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 5


@dataclass(frozen=True)
class RuntimeSettings:
    persistence: PersistenceConfig
    host: HostConfig
    logging: LoggingConfig
