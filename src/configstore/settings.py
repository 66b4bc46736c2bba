"""Runtime settings for configstore.

Everything is read from environment variables, with a ``.env`` file in the
working directory picked up first, so deployments can switch backends or
hosts without touching Python.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from configstore.core.config import HostConfig, LoggingConfig, PersistenceConfig, RuntimeSettings


def resolve_data_root(module_dir: str, cwd: Optional[str] = None) -> str:
    """Return where default data files live.

    A source checkout (a ``pyproject.toml`` two levels up) keeps them next to
    the project; an installed package uses the working directory instead of
    the interpreter's ``site-packages``.
    """

    checkout_root = os.path.abspath(os.path.join(module_dir, "..", ".."))
    if os.path.isfile(os.path.join(checkout_root, "pyproject.toml")):
        return checkout_root
    return os.path.abspath(cwd or os.getcwd())


PROJECT_ROOT = resolve_data_root(os.path.dirname(__file__))

# Default locations sit next to the project so a fresh checkout just works.
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")
DEFAULT_DB_PATH = os.path.join(PROJECT_ROOT, "configstore.db")

BACKENDS = ("json", "sqlite")
HOSTS = ("tui", "command")


def _optional(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name, "").strip()
    return value or None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> RuntimeSettings:
    """Build RuntimeSettings from ``environ`` (defaults to ``os.environ`` after .env)."""

    if environ is None:
        load_dotenv()
        environ = os.environ

    backend = environ.get("CONFIGSTORE_BACKEND", "json").strip().lower() or "json"
    if backend not in BACKENDS:
        raise ValueError(f"CONFIGSTORE_BACKEND must be one of {', '.join(BACKENDS)}: {backend}")

    host_name = _optional(environ, "CONFIGSTORE_HOST")
    if host_name:
        host_name = host_name.lower()
        # Unknown hosts behave like no host; detection simply never matches.
        if host_name not in HOSTS:
            host_name = None

    return RuntimeSettings(
        persistence=PersistenceConfig(
            backend=backend,
            config_path=_optional(environ, "CONFIGSTORE_PATH") or DEFAULT_CONFIG_PATH,
            db_path=_optional(environ, "CONFIGSTORE_DB_PATH") or DEFAULT_DB_PATH,
        ),
        host=HostConfig(
            name=host_name,
            theme_command=_optional(environ, "CONFIGSTORE_THEME_COMMAND"),
        ),
        logging=LoggingConfig(
            level=(environ.get("CONFIGSTORE_LOG_LEVEL", "INFO").strip() or "INFO").upper(),
            file_path=_optional(environ, "CONFIGSTORE_LOG_FILE"),
        ),
    )
