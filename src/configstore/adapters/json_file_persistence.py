"""JSON file persistence adapter.

Implements the core PersistencePort on top of a single JSON object file.
Blocking file I/O runs in a worker thread to keep the event loop free.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path

from configstore.core.errors import LoadError, SaveError
from configstore.core.models import AppConfig

LOGGER = logging.getLogger(__name__)


class JsonFilePersistence:
    """Reads and writes the config as one JSON object."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> AppConfig:
        return await asyncio.to_thread(self._read)

    async def save(self, config: AppConfig) -> None:
        await asyncio.to_thread(self._write, config)

    def _read(self) -> AppConfig:
        # First run: nothing persisted yet, start from defaults.
        if not self._path.exists():
            LOGGER.info("%s missing, using default config", self._path)
            return AppConfig()
        try:
            loaded = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise LoadError(f"{self._path.name} error: {exc.msg}") from exc
        except OSError as exc:
            raise LoadError(f"load failed: {exc.strerror or exc}") from exc
        if not isinstance(loaded, dict):
            raise LoadError("config root must be an object")
        return AppConfig.from_dict(loaded)

    def _write(self, config: AppConfig) -> None:
        # Write a sibling temp file first so a crash never leaves a half-written config.
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(config.to_dict(), indent=2, ensure_ascii=True) + "\n",
                encoding="utf-8",
            )
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as exc:
            message = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
            raise SaveError(f"save failed: {message}") from exc
