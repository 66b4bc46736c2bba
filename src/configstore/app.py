"""Application entry point for configstore."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint

from configstore import settings
from configstore.adapters.command_notifier import CommandThemeNotifier
from configstore.adapters.json_file_persistence import JsonFilePersistence
from configstore.adapters.sqlite_persistence import SQLitePersistence
from configstore.core.config import LoggingConfig, RuntimeSettings
from configstore.core.store import ConfigStore

NAME = "CONFIGSTORE"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging(config: LoggingConfig) -> None:
    level = getattr(logging, config.level, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if config.file_path:
        path = config.file_path
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers)


def build_store(runtime: RuntimeSettings) -> ConfigStore:
    """Wire a ConfigStore from settings, choosing persistence and host adapters."""

    persistence_cfg = runtime.persistence
    if persistence_cfg.backend == "sqlite":
        persistence = SQLitePersistence(persistence_cfg.db_path)
        persistence.init_db()
    elif persistence_cfg.backend == "json":
        persistence = JsonFilePersistence(persistence_cfg.config_path)
    else:
        raise RuntimeError("backend must be 'json' or 'sqlite'")

    # The TUI host is attached by the panel itself once its app exists.
    notifier = None
    if runtime.host.name == "command" and runtime.host.theme_command:
        notifier = CommandThemeNotifier(runtime.host.theme_command)
    return ConfigStore(persistence, host_notifier=notifier)


async def _show(store: ConfigStore) -> int:
    await store.load_config()
    if store.error:
        print(f"error: {store.error}", file=sys.stderr)
        return 1
    print(json.dumps(store.config.to_dict(), indent=2, ensure_ascii=False))
    return 0


async def _set_field(store: ConfigStore, field: str, value: str) -> int:
    await store.load_config()
    if store.error:
        print(f"error: {store.error}", file=sys.stderr)
        return 1
    updater = store.update_theme if field == "theme" else store.update_language
    try:
        await updater(value)
    except Exception as exc:
        logging.getLogger(__name__).debug("Update of %s failed", field, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"{field}: {getattr(store.config, field)}")
    return 0


def _panel(runtime: RuntimeSettings) -> int:
    from configstore.frontend.app import ConfigPanelApp

    _print_banner()
    store = build_store(runtime)
    ConfigPanelApp(store, host_theme_sync=runtime.host.name == "tui").run()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="configstore")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("show", help="Print the persisted config")
    theme_parser = subparsers.add_parser("set-theme", help="Change the theme")
    theme_parser.add_argument("theme")
    language_parser = subparsers.add_parser("set-language", help="Change the language")
    language_parser.add_argument("language")
    subparsers.add_parser("panel", help="Launch the config TUI")

    args = parser.parse_args(argv)
    runtime = settings.load_settings()
    _configure_logging(runtime.logging)
    logger = logging.getLogger(__name__)
    logger.debug("Using %s backend", runtime.persistence.backend)

    if args.command == "show":
        return asyncio.run(_show(build_store(runtime)))
    if args.command == "set-theme":
        return asyncio.run(_set_field(build_store(runtime), "theme", args.theme))
    if args.command == "set-language":
        return asyncio.run(_set_field(build_store(runtime), "language", args.language))
    return _panel(runtime)


if __name__ == "__main__":
    sys.exit(main())
