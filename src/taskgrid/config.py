# src/taskgrid/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every field has a default.
- Bad numeric values fall back to defaults instead of crashing the UI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKGRID"

DEFAULT_TODOS_URL = "https://jsonplaceholder.typicode.com/todos"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int, *, minimum: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Remote todo source ----
    todos_url: str
    fetch_connect_timeout: float
    fetch_read_timeout: float
    offline: bool

    # ---- UI ----
    notify_ttl_ms: int
    page_size: int
    clear_screen: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskgrid").strip() or "taskgrid"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskgrid"))

        todos_url = _env(_k("TODOS_URL"), DEFAULT_TODOS_URL).strip() or DEFAULT_TODOS_URL
        fetch_connect_timeout = _env_float(_k("FETCH_CONNECT_TIMEOUT"), 5.0)
        fetch_read_timeout = _env_float(_k("FETCH_READ_TIMEOUT"), 15.0)
        offline = _env_bool(_k("OFFLINE"), False)

        notify_ttl_ms = _env_int(_k("NOTIFY_TTL_MS"), 1000, minimum=0)
        page_size = _env_int(_k("PAGE_SIZE"), 20, minimum=1)
        clear_screen = _env_bool(_k("CLEAR_SCREEN"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            todos_url=todos_url,
            fetch_connect_timeout=fetch_connect_timeout,
            fetch_read_timeout=fetch_read_timeout,
            offline=offline,
            notify_ttl_ms=notify_ttl_ms,
            page_size=page_size,
            clear_screen=clear_screen,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
