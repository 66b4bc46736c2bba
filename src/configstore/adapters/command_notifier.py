"""Shell command host notifier.

Lets a desktop shell or window manager follow theme changes: a configured
command template is run with ``{theme}`` substituted.
"""

from __future__ import annotations

import asyncio
import os
import shlex
from typing import Mapping, Optional

from configstore.core.errors import NotifyError

HOST_ENV_VAR = "CONFIGSTORE_HOST"
HOST_NAME = "command"


class CommandThemeNotifier:
    """Host notifier adapter that runs a command per theme change."""

    def __init__(self, command_template: str, environ: Optional[Mapping[str, str]] = None) -> None:
        self._command_template = command_template
        self._environ = environ if environ is not None else os.environ

    def is_host_environment(self) -> bool:
        return self._environ.get(HOST_ENV_VAR, "").lower() == HOST_NAME and bool(
            self._command_template.strip()
        )

    def build_args(self, theme: str) -> list[str]:
        return [part.replace("{theme}", theme) for part in shlex.split(self._command_template)]

    async def notify_theme_changed(self, theme: str) -> None:
        args = self.build_args(theme)
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise NotifyError(f"Theme command failed to start: {exc}") from exc
        _, stderr = await process.communicate()
        if process.returncode != 0:
            body = stderr.decode("utf-8", errors="replace").strip()
            raise NotifyError(f"Theme command exited {process.returncode}: {body}")
