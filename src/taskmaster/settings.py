from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .storage import JsonOptions


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - TASKMASTER_TASKS_FILE: path to the tasks JSON file. Default './data/tasks.json'
    - TASKMASTER_JSON_INDENT: indentation used when writing the file. Default 2
    - TASKMASTER_ATOMIC_WRITES: 'true' to write through a temp file + rename (default: false)
    - TASKMASTER_LOG_LEVEL: logging level name. Default 'INFO'
    - TASKMASTER_LOG_FILE: optional log file path; console only when unset
    """

    tasks_file: str
    json_indent: int
    atomic_writes: bool
    log_level: str
    log_file: Optional[str]

    def json_options(self) -> JsonOptions:
        """Serialization options for the task store built from these settings."""
        return JsonOptions(indent=self.json_indent, atomic_writes=self.atomic_writes)


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_bool(value: str, default: bool = False) -> bool:
    v = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_int(value: str, default: int) -> int:
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    tasks_file = _get_env("TASKMASTER_TASKS_FILE", "./data/tasks.json").strip()
    json_indent = _parse_int(_get_env("TASKMASTER_JSON_INDENT", "2"), 2)
    atomic_writes = _parse_bool(_get_env("TASKMASTER_ATOMIC_WRITES", "false"), False)

    log_level = _get_env("TASKMASTER_LOG_LEVEL", "INFO").strip().upper()
    log_file = os.getenv("TASKMASTER_LOG_FILE") or None

    return Settings(
        tasks_file=tasks_file,
        json_indent=json_indent,
        atomic_writes=atomic_writes,
        log_level=log_level,
        log_file=log_file,
    )
