# src/todo_cras/config.py

"""Settings loaded from environment variables (+ optional .env).

Variables:
- TODO_FILE / TODO_CRAS_FILE: store file path (default: ~/todo.txt)
- TODO_CRAS_LOG_LEVEL: console log level (default: WARNING)
- TODO_CRAS_LOG_DIR: directory for a debug log file (default: no log file)
- TODO_CRAS_ALT_SCREEN: use the alternate screen while editing (default: true)
- TODO_CRAS_BACKLOG_MARKER: mark overdue tasks with [BACKLOG] (default: true)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO_CRAS"

# Unprefixed name kept for existing setups.
LEGACY_FILE_VAR = "TODO_FILE"

DEFAULT_FILE_NAME = "todo.txt"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# A local .env never overrides variables already set in the environment.
load_dotenv(override=False)


def _env(env: Mapping[str, str], name: str, default: str = "") -> str:
    v = env.get(name)
    return default if v is None else v


def _first_env(env: Mapping[str, str], *names: str, default: str | None = None) -> str | None:
    for n in names:
        v = env.get(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(env: Mapping[str, str], name: str, default: Path | None) -> Path | None:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    todo_file: Path

    # ---- logging ----
    log_level: str
    log_dir: Path | None

    # ---- terminal ----
    alt_screen: bool
    backlog_marker: bool

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        raw_file = _first_env(env, LEGACY_FILE_VAR, _k("FILE"))
        todo_file = Path(raw_file).expanduser() if raw_file else Path.home() / DEFAULT_FILE_NAME

        return Settings(
            todo_file=todo_file,
            log_level=_env(env, _k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_dir=_env_path(env, _k("LOG_DIR"), None),
            alt_screen=_env_bool(env, _k("ALT_SCREEN"), True),
            backlog_marker=_env_bool(env, _k("BACKLOG_MARKER"), True),
        )


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings.from_env()
